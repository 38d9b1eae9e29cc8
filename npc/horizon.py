"""
剩余手数估计

递归搜索把手牌出完所需的最少手数 (不考虑对手、不考虑场面合法性)，
以 (革命状态, 手牌签名) 为键做记忆化。
"""
from typing import Dict, Iterable, List, Optional, Tuple

from core.cards import Card, cards_to_str, remove_cards
from core.combinations import CombinationGenerator

HorizonCache = Dict[Tuple[bool, str], int]


class TurnHorizonEstimator:
    """
    剩余手数估计器

    缓存属于实例，只在一次评估内复用，不在不同调用之间共享

    Example:
        >>> estimator = TurnHorizonEstimator(revolution=False)
        >>> estimator.estimate(hand)
        2
    """

    def __init__(self, revolution: bool = False, cache: Optional[HorizonCache] = None):
        self.revolution = revolution
        self._cache: HorizonCache = cache if cache is not None else {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def estimate(self, hand: Iterable[Card]) -> int:
        """
        估计出完手牌的最少手数

        Args:
            hand: 剩余手牌

        Returns:
            最少手数 (空手牌为 0)
        """
        cards: List[Card] = list(hand)
        if not cards:
            return 0

        key = (self.revolution, cards_to_str(cards))
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        # 上界: 每张牌单独出
        best = len(cards)
        for combo in CombinationGenerator(cards, self.revolution).generate_all():
            rest = remove_cards(cards, combo.cards)
            turns = 1 + self.estimate(rest)
            if turns < best:
                best = turns

        self._cache[key] = best
        return best


def estimate_minimum_turns(
    hand: Iterable[Card],
    revolution: bool = False,
    cache: Optional[HorizonCache] = None,
) -> int:
    """
    估计出完手牌的最少手数

    Args:
        hand: 剩余手牌
        revolution: 是否处于革命状态
        cache: 可选的记忆化缓存，省略时新建

    Returns:
        最少手数
    """
    return TurnHorizonEstimator(revolution, cache).estimate(hand)
