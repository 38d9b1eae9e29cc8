"""
规则引擎 - 大小比较、合法性过滤

所有方法都是纯函数，无状态
"""
from typing import Iterable, List

from .cards import Card, get_rank_weight
from .combinations import Combination, CombinationGenerator
from .state import FieldState


class RuleEngine:
    """
    大富豪规则引擎

    提供大小比较、合法出牌过滤等功能
    所有方法都是静态方法，无状态
    """

    @staticmethod
    def beats(candidate: Combination, current: Combination, revolution: bool) -> bool:
        """
        判断 candidate 能否压过 current

        Args:
            candidate: 要出的牌型
            current: 场上的牌型
            revolution: 是否处于革命状态

        Returns:
            是否能压过
        """
        # 炸弹可以打任何非炸弹牌型
        if candidate.is_bomb and not current.is_bomb:
            return True

        # 不同类型不可比较
        if candidate.combination_type != current.combination_type:
            return False

        # 长度不同不可比较
        if len(candidate) != len(current):
            return False

        # 同类型比较最强的一张
        candidate_weight = get_rank_weight(candidate.top_card.rank, revolution)
        current_weight = get_rank_weight(current.top_card.rank, revolution)
        return candidate_weight > current_weight

    @staticmethod
    def filter_legal(combinations: Iterable[Combination], field: FieldState) -> List[Combination]:
        """
        从生成的牌型中筛选出当前可以出的

        Args:
            combinations: 手牌能组成的牌型
            field: 场面状态

        Returns:
            合法牌型列表
        """
        # 场上无牌: 主动出牌，所有牌型都合法
        if field.current_combination is None:
            return list(combinations)

        current = field.current_combination
        return [
            combo for combo in combinations
            if RuleEngine.beats(combo, current, field.revolution)
        ]

    @staticmethod
    def legal_combinations(hand: Iterable[Card], field: FieldState) -> List[Combination]:
        """
        生成手牌在当前场面下的所有合法出牌

        Args:
            hand: 当前手牌
            field: 场面状态

        Returns:
            合法牌型列表
        """
        generator = CombinationGenerator(hand, field.revolution)
        return RuleEngine.filter_legal(generator.generate_all(), field)

    @staticmethod
    def can_beat(hand: Iterable[Card], field: FieldState) -> bool:
        """
        检查手牌是否有可以出的牌

        Args:
            hand: 当前手牌
            field: 场面状态

        Returns:
            是否存在合法出牌
        """
        return bool(RuleEngine.legal_combinations(hand, field))
