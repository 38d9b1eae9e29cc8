"""
牌型定义与牌型生成器

大富豪共有 5 种牌型: 单张、对子、三张、阶梯 (同花顺, 至少3张)、炸弹 (四张相同)
"""
from enum import IntEnum
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .cards import Card, Rank, Suit, cards_to_str, get_rank_weight, group_by_rank, sort_cards


class CombinationType(IntEnum):
    """牌型类型"""
    SINGLE = 1      # 单张
    PAIR = 2        # 对子
    TRIPLE = 3      # 三张
    SEQUENCE = 4    # 阶梯 (同花色连续, 至少3张)
    BOMB = 5        # 炸弹 (四张相同)


# 阶梯的最小长度
MIN_SEQUENCE_LEN = 3

# 同点数牌型需要的张数
GROUP_SIZES: Dict[CombinationType, int] = {
    CombinationType.PAIR: 2,
    CombinationType.TRIPLE: 3,
    CombinationType.BOMB: 4,
}

# 牌型优先级 (越稀有越高)
COMBINATION_PRIORITY: Dict[CombinationType, int] = {
    CombinationType.SINGLE: 1,
    CombinationType.PAIR: 2,
    CombinationType.TRIPLE: 3,
    CombinationType.SEQUENCE: 3,
    CombinationType.BOMB: 5,
}

COMBINATION_NAMES: Dict[CombinationType, str] = {
    CombinationType.SINGLE: "シングル",
    CombinationType.PAIR: "ペア",
    CombinationType.TRIPLE: "トリプル",
    CombinationType.SEQUENCE: "階段",
    CombinationType.BOMB: "ボム",
}


@dataclass(frozen=True, slots=True)
class Combination:
    """
    不可变牌型表示

    Attributes:
        combination_type: 牌型
        cards: 组成牌型的牌 (按当前革命状态的牌力升序)
        strength: 平均牌力 (启发式比较用)
    """
    combination_type: CombinationType
    cards: Tuple[Card, ...]
    strength: float

    @classmethod
    def build(cls, combination_type: CombinationType, cards: Iterable[Card], revolution: bool) -> 'Combination':
        """按牌力排序并计算强度"""
        ordered = tuple(sort_cards(cards, revolution))
        strength = sum(get_rank_weight(card.rank, revolution) for card in ordered) / len(ordered)
        return cls(combination_type=combination_type, cards=ordered, strength=strength)

    @property
    def top_card(self) -> Card:
        """最强的一张 (用于大小比较)"""
        return self.cards[-1]

    @property
    def is_bomb(self) -> bool:
        return self.combination_type == CombinationType.BOMB

    @property
    def priority(self) -> int:
        return COMBINATION_PRIORITY[self.combination_type]

    @property
    def signature(self) -> str:
        """去重用的键: 牌型 + 牌的规范签名"""
        return f"{self.combination_type.name.lower()}:{cards_to_str(self.cards)}"

    def __len__(self) -> int:
        return len(self.cards)


def describe_combination(combination: Combination) -> str:
    """可读描述，如 "階段: 5H, 6H, 7H" """
    cards = ', '.join(str(card) for card in combination.cards)
    return f"{COMBINATION_NAMES[combination.combination_type]}: {cards}"


class CombinationGenerator:
    """
    牌型生成器

    根据手牌生成所有可能的牌型组合 (不考虑场上的牌)
    """

    def __init__(self, hand_cards: Iterable[Card], revolution: bool = False):
        """
        Args:
            hand_cards: 手牌
            revolution: 是否处于革命状态
        """
        self.hand = list(hand_cards)
        self.revolution = revolution
        self._groups = group_by_rank(self.hand)

    def gen_singles(self) -> List[Combination]:
        """生成所有单张"""
        return [Combination.build(CombinationType.SINGLE, [card], self.revolution) for card in self.hand]

    def _gen_group(self, combination_type: CombinationType) -> List[Combination]:
        """
        生成同点数牌型

        每个点数只取前 N 张，不枚举所有 N 张子集
        """
        size = GROUP_SIZES[combination_type]
        result = []
        for cards in self._groups.values():
            if len(cards) >= size:
                result.append(Combination.build(combination_type, cards[:size], self.revolution))
        return result

    def gen_pairs(self) -> List[Combination]:
        """生成所有对子"""
        return self._gen_group(CombinationType.PAIR)

    def gen_triples(self) -> List[Combination]:
        """生成所有三张"""
        return self._gen_group(CombinationType.TRIPLE)

    def gen_bombs(self) -> List[Combination]:
        """生成所有炸弹"""
        return self._gen_group(CombinationType.BOMB)

    def gen_sequences(self) -> List[Combination]:
        """
        生成所有阶梯

        按花色分组 (Joker 和 2 不参与)，按牌力排序后从每个起点向后延伸，
        长度达到 3 的每个前缀都是一个阶梯
        """
        per_suit: Dict[Suit, List[Card]] = {}
        for card in self.hand:
            if card.suit == Suit.JOKER or card.rank >= Rank.TWO:
                continue
            per_suit.setdefault(card.suit, []).append(card)

        result = []
        for cards in per_suit.values():
            ordered = sort_cards(cards, self.revolution)
            weights = [get_rank_weight(card.rank, self.revolution) for card in ordered]

            for start in range(len(ordered)):
                sequence = [ordered[start]]
                last_weight = weights[start]

                for idx in range(start + 1, len(ordered)):
                    # 同花色同点数的重复牌直接跳过
                    if weights[idx] == last_weight:
                        continue
                    if weights[idx] != last_weight + 1:
                        break
                    sequence.append(ordered[idx])
                    last_weight = weights[idx]
                    if len(sequence) >= MIN_SEQUENCE_LEN:
                        result.append(Combination.build(CombinationType.SEQUENCE, sequence, self.revolution))

        return result

    def generate_all(self) -> List[Combination]:
        """
        生成所有可能的牌型 (去重)

        Returns:
            所有牌型列表
        """
        unique: Dict[str, Combination] = {}
        for combo in (
            self.gen_singles()
            + self.gen_pairs()
            + self.gen_triples()
            + self.gen_sequences()
            + self.gen_bombs()
        ):
            unique.setdefault(combo.signature, combo)
        return list(unique.values())


def generate_all_combinations(hand: Iterable[Card], revolution: bool = False) -> List[Combination]:
    """生成手牌能组成的所有牌型"""
    return CombinationGenerator(hand, revolution).generate_all()
