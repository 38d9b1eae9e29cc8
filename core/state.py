"""
场面状态定义

使用不可变数据结构:
- 可哈希
- 线程安全 (多个桌子/玩家可并行决策)
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .combinations import Combination


class Controller(Enum):
    """玩家控制方式"""
    HUMAN = "human"
    NPC = "npc"


class LastAction(Enum):
    """对手最近一次行动"""
    PLAY = "play"
    PASS = "pass"


@dataclass(frozen=True)
class FieldState:
    """
    场面状态

    Attributes:
        current_combination: 场上的牌型 (None 表示可以自由出牌)
        revolution: 是否处于革命状态
        passes_in_row: 连续 PASS 的次数
    """
    current_combination: Optional[Combination] = None
    revolution: bool = False
    passes_in_row: int = 0

    def __post_init__(self):
        if self.passes_in_row < 0:
            raise ValueError(f"passes_in_row must be >= 0, got {self.passes_in_row}")

    @property
    def is_open(self) -> bool:
        """场上无牌"""
        return self.current_combination is None


@dataclass(frozen=True)
class OpponentSummary:
    """
    对手的公开信息 (只有剩余张数，不含手牌)

    Attributes:
        id: 对手 id
        name: 显示名
        remaining_cards: 剩余张数
        last_action: 最近一次行动
    """
    id: str
    name: str
    remaining_cards: int
    last_action: Optional[LastAction] = None

    def __post_init__(self):
        if self.remaining_cards < 0:
            raise ValueError(f"remaining_cards must be >= 0, got {self.remaining_cards}")


@dataclass(frozen=True)
class TableState:
    """
    桌面状态

    Attributes:
        field: 场面状态
        opponents: 对手信息 (按座位顺序)
        turn_count: 回合数 (仅供参考)
    """
    field: FieldState = FieldState()
    opponents: Tuple[OpponentSummary, ...] = ()
    turn_count: int = 0

    def __post_init__(self):
        # 允许传入 list
        object.__setattr__(self, "opponents", tuple(self.opponents))

    @property
    def min_opponent_cards(self) -> Optional[int]:
        """对手中最少的剩余张数，无对手时为 None"""
        if not self.opponents:
            return None
        return min(opponent.remaining_cards for opponent in self.opponents)


@dataclass(frozen=True)
class Participant:
    """
    参加者

    Attributes:
        id: 唯一 id
        name: 显示名
        is_human: 是否为人类玩家
        controller: 控制方式
    """
    id: str
    name: str
    is_human: bool
    controller: Controller
