"""
NPC 决策策略

牌型生成 → 合法性过滤 → 评估 → 与 PASS 比较后决定出牌或 PASS
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional
import logging

from core.cards import Card
from core.combinations import Combination
from core.rules import RuleEngine
from core.state import TableState

from .config import NpcConfig
from .evaluator import MoveEvaluator, ScoreBreakdown

logger = logging.getLogger(__name__)


class NpcAction(Enum):
    """NPC 行动"""
    PLAY = "play"
    PASS = "pass"


@dataclass(frozen=True)
class NpcMove:
    """
    NPC 决策结果

    Attributes:
        action: 出牌或 PASS
        combination: 出牌时的牌型
        score: 总分
        breakdown: 分项得分
        explanation: 可读说明
    """
    action: NpcAction
    score: float
    breakdown: ScoreBreakdown
    explanation: str
    combination: Optional[Combination] = None

    @property
    def is_pass(self) -> bool:
        return self.action == NpcAction.PASS


class DaifugoNpc:
    """
    大富豪 NPC

    无内部状态，可以在多个桌子上并行使用
    """

    def __init__(self, npc_id: str, name: str, config: Optional[NpcConfig] = None):
        self.id = npc_id
        self.name = name
        self.config = config or NpcConfig()
        self.evaluator = MoveEvaluator(self.config)

    def choose_move(self, hand: Iterable[Card], state: TableState) -> NpcMove:
        """
        选择行动

        Args:
            hand: NPC 的手牌
            state: 桌面状态

        Returns:
            NpcMove (不会抛出异常)
        """
        hand = list(hand)
        legal = RuleEngine.legal_combinations(hand, state.field)
        pass_eval = self.evaluator.evaluate_pass(state)

        # 无牌可出
        if not legal:
            logger.debug(f"{self.name}: no legal move, pass (score {pass_eval.score:.2f})")
            return NpcMove(
                action=NpcAction.PASS,
                score=pass_eval.score,
                breakdown=pass_eval.breakdown,
                explanation=pass_eval.explanation,
            )

        evaluations = self.evaluator.evaluate_all(hand, legal, state)
        best = evaluations[0]

        # 没有明显优于 PASS 的出牌
        if best.score <= pass_eval.score + self.config.pass_margin:
            logger.debug(
                f"{self.name}: best {best.score:.2f} <= pass {pass_eval.score:.2f} + "
                f"{self.config.pass_margin}, pass"
            )
            return NpcMove(
                action=NpcAction.PASS,
                score=pass_eval.score,
                breakdown=pass_eval.breakdown,
                explanation="強い手がないためパス",
            )

        logger.debug(f"{self.name}: {best.explanation} (score {best.score:.2f}, {len(legal)} candidates)")
        return NpcMove(
            action=NpcAction.PLAY,
            combination=best.combination,
            score=best.score,
            breakdown=best.breakdown,
            explanation=best.explanation,
        )


def choose_move(hand: Iterable[Card], state: TableState, config: Optional[NpcConfig] = None) -> NpcMove:
    """不需要 NPC 身份时的函数形式"""
    return DaifugoNpc("npc", "NPC", config).choose_move(hand, state)
