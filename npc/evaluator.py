"""
出牌评估器

对每个合法牌型从四个独立维度打分:
- shape: 牌型效率 (牌型稀有度、张数、剩余手数)
- control: 控场 (出相对最强的牌、主动出牌、炸弹、长阶梯)
- pressure: 压制 (对手剩余张数很少时出组合牌/炸弹)
- endgame: 终局 (出完或接近出完)

PASS 也按 patience - threat 对称地打分。
"""
from dataclasses import dataclass, fields
from typing import Dict, Iterable, List, Optional, Sequence

from core.cards import Card, get_rank_weight, remove_cards
from core.combinations import Combination, CombinationType, describe_combination
from core.state import FieldState, OpponentSummary, TableState

from .config import NpcConfig
from .horizon import TurnHorizonEstimator


@dataclass(frozen=True)
class ScoreBreakdown:
    """分项得分 (未使用的分项为 None)"""
    shape: Optional[float] = None
    control: Optional[float] = None
    pressure: Optional[float] = None
    endgame: Optional[float] = None
    patience: Optional[float] = None
    threat: Optional[float] = None

    def as_dict(self) -> Dict[str, float]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @property
    def total(self) -> float:
        return sum(self.as_dict().values())


@dataclass(frozen=True)
class EvaluatedMove:
    """
    评估结果

    Attributes:
        combination: 被评估的牌型 (PASS 时为 None)
        score: 总分
        breakdown: 分项得分
        explanation: 可读说明
        remaining_turns: 出牌后剩余手牌的预估手数
    """
    combination: Optional[Combination]
    score: float
    breakdown: ScoreBreakdown
    explanation: str
    remaining_turns: Optional[int] = None


class MoveEvaluator:
    """出牌/PASS 评估器"""

    def __init__(self, config: Optional[NpcConfig] = None):
        self.config = config or NpcConfig()

    def compute_shape_score(self, combo: Combination, remaining_turns: int) -> float:
        cfg = self.config
        coverage = combo.priority * cfg.shape_priority_coef + len(combo) * cfg.shape_length_coef
        smoothness = max(0.0, cfg.shape_smoothness_base - remaining_turns * cfg.shape_smoothness_coef)
        return coverage + smoothness - remaining_turns * cfg.shape_turn_penalty

    def compute_control_score(self, combo: Combination, hand: Sequence[Card], field: FieldState) -> float:
        cfg = self.config
        revolution = field.revolution
        highest_in_hand = max((get_rank_weight(card.rank, revolution) for card in hand), default=0)
        highest_in_combo = max(get_rank_weight(card.rank, revolution) for card in combo.cards)

        control = highest_in_combo / max(1, highest_in_hand) * cfg.control_ratio_coef
        if field.is_open:
            control += cfg.control_open_bonus
        if combo.is_bomb:
            control += cfg.control_bomb_bonus
        if (combo.combination_type == CombinationType.SEQUENCE
                and len(combo) >= cfg.control_sequence_min_len):
            control += cfg.control_sequence_bonus
        return control

    def compute_pressure_score(self, combo: Combination, opponents: Iterable[OpponentSummary]) -> float:
        cfg = self.config
        critical = [o for o in opponents if o.remaining_cards <= cfg.critical_cards]
        if not critical:
            return 0.0

        # 对手越接近出完越紧迫
        score = sum(
            cfg.pressure_urgency_base - o.remaining_cards * cfg.pressure_urgency_coef
            for o in critical
        )
        if combo.combination_type != CombinationType.SINGLE:
            score += cfg.pressure_combo_bonus
        if combo.is_bomb:
            score += cfg.pressure_bomb_bonus
        return score

    def compute_endgame_bonus(self, remaining: Sequence[Card], opponents: Sequence[OpponentSummary]) -> float:
        cfg = self.config
        if not remaining:
            return cfg.endgame_win_bonus

        if not opponents:
            return cfg.endgame_solo_bonus if len(remaining) <= cfg.endgame_near_cards else 0.0

        smallest_opponent = min(o.remaining_cards for o in opponents)
        if len(remaining) <= cfg.endgame_near_cards and smallest_opponent > len(remaining):
            return cfg.endgame_near_bonus
        if len(remaining) <= cfg.endgame_close_cards:
            return cfg.endgame_close_bonus
        return 0.0

    def evaluate(self, hand: Sequence[Card], combo: Combination, state: TableState) -> EvaluatedMove:
        """
        评估一个牌型

        Args:
            hand: 当前手牌
            combo: 要评估的合法牌型
            state: 桌面状态

        Returns:
            EvaluatedMove
        """
        hand = list(hand)
        remaining = remove_cards(hand, combo.cards)

        # 每个候选牌型使用独立的缓存
        estimator = TurnHorizonEstimator(state.field.revolution)
        remaining_turns = estimator.estimate(remaining)

        breakdown = ScoreBreakdown(
            shape=self.compute_shape_score(combo, remaining_turns),
            control=self.compute_control_score(combo, hand, state.field),
            pressure=self.compute_pressure_score(combo, state.opponents),
            endgame=self.compute_endgame_bonus(remaining, state.opponents),
        )
        return EvaluatedMove(
            combination=combo,
            score=breakdown.total,
            breakdown=breakdown,
            explanation=f"{describe_combination(combo)} を選択。残り手数予測: {remaining_turns} 手",
            remaining_turns=remaining_turns,
        )

    def evaluate_all(self, hand: Sequence[Card], combos: Iterable[Combination], state: TableState) -> List[EvaluatedMove]:
        """评估所有牌型，按总分降序"""
        evaluations = [self.evaluate(hand, combo, state) for combo in combos]
        evaluations.sort(key=lambda e: e.score, reverse=True)
        return evaluations

    def compute_threat(self, opponents: Iterable[OpponentSummary]) -> float:
        """对手威胁 (每个对手只计入最高的一档)"""
        cfg = self.config
        threat = 0.0
        for opponent in opponents:
            if opponent.remaining_cards <= cfg.threat_high_cards:
                threat += cfg.threat_high
            elif opponent.remaining_cards <= cfg.threat_medium_cards:
                threat += cfg.threat_medium
            elif opponent.remaining_cards <= cfg.threat_low_cards:
                threat += cfg.threat_low
        return threat

    def evaluate_pass(self, state: TableState) -> EvaluatedMove:
        """
        评估 PASS

        连续 PASS 越多耐心分越低，对手越接近出完威胁越大
        """
        cfg = self.config
        threat = self.compute_threat(state.opponents)
        patience = max(0.0, cfg.patience_base - state.field.passes_in_row * cfg.patience_decay)
        breakdown = ScoreBreakdown(patience=patience, threat=-threat)
        return EvaluatedMove(
            combination=None,
            score=patience - threat,
            breakdown=breakdown,
            explanation="今回はパスして様子を見る",
        )
