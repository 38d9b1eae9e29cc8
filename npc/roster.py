"""
参加者补全

空座位用不重名的 NPC 填满
"""
from typing import Callable, Iterable, List, Optional, Set
import logging
import math
import random as _random
import uuid

from core.state import Controller, Participant

logger = logging.getLogger(__name__)

FAMILY_NAMES = (
    "佐藤", "鈴木", "高橋", "田中", "伊藤",
    "渡辺", "山本", "中村", "小林", "加藤",
    "吉田", "山田", "佐々木", "山口", "松本",
    "井上", "木村", "林", "清水", "山崎",
)

GIVEN_NAMES = (
    "太郎", "葵", "大輔", "優奈", "悠人",
    "花", "蓮", "陽菜", "蒼", "さくら",
    "航", "結衣", "颯太", "愛", "翼",
    "美咲", "陽斗", "凛", "健太", "琴音",
)

RandomSource = Callable[[], float]


def _pick(pool, random: RandomSource) -> str:
    return pool[math.floor(random() * len(pool))]


def _default_npc_id() -> str:
    return f"npc-{uuid.uuid4().hex[:12]}"


def generate_npc_name(used_names: Set[str], random: RandomSource = _random.random) -> str:
    """
    生成一个未使用的 NPC 名字，并加入 used_names

    Args:
        used_names: 已使用的名字 (会被修改)
        random: [0, 1) 随机数源

    Returns:
        "姓 名" 形式的名字，名字空间用尽时为 "NPC<n>"
    """
    for _ in range(len(FAMILY_NAMES) * len(GIVEN_NAMES)):
        name = f"{_pick(FAMILY_NAMES, random)} {_pick(GIVEN_NAMES, random)}"
        if name not in used_names:
            used_names.add(name)
            return name

    suffix = len(used_names) + 1
    fallback = f"NPC{suffix}"
    while fallback in used_names:
        suffix += 1
        fallback = f"NPC{suffix}"
    logger.info(f"NPC name space exhausted, using {fallback}")
    used_names.add(fallback)
    return fallback


def ensure_npc_participants(
    participants: Iterable[Participant],
    desired_count: int,
    random: RandomSource = _random.random,
    id_factory: Optional[Callable[[], str]] = None,
) -> List[Participant]:
    """
    用 NPC 补足参加者

    Args:
        participants: 现有参加者 (不会被修改)
        desired_count: 目标人数
        random: [0, 1) 随机数源 (测试时注入)
        id_factory: NPC id 生成函数

    Returns:
        新的参加者列表
    """
    if desired_count < 0:
        raise ValueError(f"desired_count must be >= 0, got {desired_count}")

    id_factory = id_factory or _default_npc_id
    result = list(participants)
    used_names = {p.name for p in result}

    while len(result) < desired_count:
        result.append(Participant(
            id=id_factory(),
            name=generate_npc_name(used_names, random),
            is_human=False,
            controller=Controller.NPC,
        ))
    return result
