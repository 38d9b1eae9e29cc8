"""
NPC Layer - 出牌决策

Modules:
    config: 评估系数配置
    horizon: 剩余手数估计
    evaluator: 出牌/PASS 评估
    policy: 决策策略
    roster: 参加者补全
"""
from .config import NpcConfig

from .horizon import (
    HorizonCache,
    TurnHorizonEstimator,
    estimate_minimum_turns,
)

from .evaluator import (
    ScoreBreakdown,
    EvaluatedMove,
    MoveEvaluator,
)

from .policy import (
    NpcAction,
    NpcMove,
    DaifugoNpc,
    choose_move,
)

from .roster import (
    FAMILY_NAMES,
    GIVEN_NAMES,
    generate_npc_name,
    ensure_npc_participants,
)

__all__ = [
    # config
    "NpcConfig",
    # horizon
    "HorizonCache",
    "TurnHorizonEstimator",
    "estimate_minimum_turns",
    # evaluator
    "ScoreBreakdown",
    "EvaluatedMove",
    "MoveEvaluator",
    # policy
    "NpcAction",
    "NpcMove",
    "DaifugoNpc",
    "choose_move",
    # roster
    "FAMILY_NAMES",
    "GIVEN_NAMES",
    "generate_npc_name",
    "ensure_npc_participants",
]
