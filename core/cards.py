"""
牌的定义与编码

大富豪使用 53 张牌：
- 3-10, J, Q, K, A, 2 各 4 种花色
- Joker 1 张 (花色为 joker)

牌力由 rank weight 决定，革命 (revolution) 时普通牌顺序反转，Joker 始终最大。
"""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Optional, Tuple
import uuid

import numpy as np


class Suit(str, Enum):
    """花色"""
    SPADE = "spade"
    HEART = "heart"
    DIAMOND = "diamond"
    CLUB = "club"
    JOKER = "joker"


class Rank(IntEnum):
    """牌面值定义 (2 = 15, Joker = 16)"""
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14
    TWO = 15
    JOKER = 16


# 按普通顺序排列的牌面值
RANKS: Tuple[int, ...] = tuple(int(r) for r in Rank)

# 普通顺序: 3 最弱, Joker 最强
NORMAL_WEIGHT: Dict[int, int] = {rank: i + 1 for i, rank in enumerate(RANKS)}

# 革命顺序: 普通牌反转, Joker 仍然最强
REVOLUTION_WEIGHT: Dict[int, int] = {
    rank: (len(RANKS) + 1 if rank == Rank.JOKER else len(RANKS) - i)
    for i, rank in enumerate(RANKS)
}

# 牌面值到显示字符的映射
RANK_TO_STR: Dict[int, str] = {
    3: '3', 4: '4', 5: '5', 6: '6', 7: '7',
    8: '8', 9: '9', 10: '10', 11: 'J', 12: 'Q',
    13: 'K', 14: 'A', 15: '2', 16: 'JK'
}

STR_TO_RANK: Dict[str, int] = {v: k for k, v in RANK_TO_STR.items()}

SUIT_TO_STR: Dict[Suit, str] = {
    Suit.SPADE: 'S', Suit.HEART: 'H', Suit.DIAMOND: 'D', Suit.CLUB: 'C', Suit.JOKER: '',
}

STR_TO_SUIT: Dict[str, Suit] = {v: k for k, v in SUIT_TO_STR.items() if v}

# 编码矩阵的行/列索引
SUIT_TO_ROW: Dict[Suit, int] = {suit: i for i, suit in enumerate(Suit)}
RANK_TO_COLUMN: Dict[int, int] = {rank: i for i, rank in enumerate(RANKS)}


@dataclass(frozen=True, slots=True)
class Card:
    """
    不可变的牌

    Attributes:
        id: 唯一标识 (按 id 移除，而不是按牌面值)
        suit: 花色
        rank: 牌面值 (3-15, 16 = Joker)
    """
    id: str
    suit: Suit
    rank: int

    def __post_init__(self):
        if self.rank not in NORMAL_WEIGHT:
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")
        if (self.rank == Rank.JOKER) != (self.suit == Suit.JOKER):
            raise ValueError(f"Joker rank and joker suit must go together: {self.rank}, {self.suit.value}")

    @property
    def is_joker(self) -> bool:
        return self.rank == Rank.JOKER

    def __str__(self) -> str:
        return f"{RANK_TO_STR[self.rank]}{SUIT_TO_STR[self.suit]}"


def make_card(rank: int, suit, card_id: Optional[str] = None) -> Card:
    """
    创建一张牌

    Args:
        rank: 牌面值
        suit: 花色 (Suit 或其字符串值)
        card_id: 牌的 id，省略时自动分配

    Returns:
        Card
    """
    if card_id is None:
        card_id = f"card-{uuid.uuid4().hex[:12]}"
    try:
        suit = Suit(suit)
    except ValueError:
        raise ValueError(f"Invalid suit: {suit}") from None
    return Card(id=card_id, suit=suit, rank=int(rank))


def build_deck(include_joker: bool = True) -> List[Card]:
    """
    创建完整牌组

    Args:
        include_joker: 是否加入 Joker

    Returns:
        52 张 (或 53 张) 牌
    """
    deck = [
        make_card(rank, suit)
        for rank in RANKS if rank != Rank.JOKER
        for suit in (Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB)
    ]
    if include_joker:
        deck.append(make_card(Rank.JOKER, Suit.JOKER))
    return deck


def get_rank_weight(rank: int, revolution: bool) -> int:
    """牌力权重 (越大越强)"""
    if revolution:
        return REVOLUTION_WEIGHT[rank]
    return NORMAL_WEIGHT[rank]


def sort_cards(cards: Iterable[Card], revolution: bool) -> List[Card]:
    """按牌力升序排列 (稳定排序)"""
    return sorted(cards, key=lambda card: get_rank_weight(card.rank, revolution))


def cards_to_str(cards: Iterable[Card]) -> str:
    """
    牌的规范签名 (与顺序无关，不含 id)

    Returns:
        如 "5heart|6heart|7heart"
    """
    ordered = sorted(cards, key=lambda card: (card.rank, card.suit.value))
    return '|'.join(f"{card.rank}{card.suit.value}" for card in ordered)


def str_to_cards(s: str) -> List[Card]:
    """
    将字符串转换为牌列表

    Args:
        s: 以空格分隔的牌，如 "5H 6H 7H 10C JK"

    Returns:
        牌列表 (自动分配 id)
    """
    cards = []
    for token in s.split():
        token = token.upper()
        if token == 'JK':
            cards.append(make_card(Rank.JOKER, Suit.JOKER))
            continue
        rank_str, suit_str = token[:-1], token[-1]
        if rank_str not in STR_TO_RANK or suit_str not in STR_TO_SUIT:
            raise ValueError(f"Cannot parse card: {token}")
        cards.append(make_card(STR_TO_RANK[rank_str], STR_TO_SUIT[suit_str]))
    return cards


def remove_cards(hand: Iterable[Card], cards_to_remove: Iterable[Card]) -> List[Card]:
    """按 id 从手牌中移除"""
    ids = {card.id for card in cards_to_remove}
    return [card for card in hand if card.id not in ids]


def group_by_rank(cards: Iterable[Card]) -> Dict[int, List[Card]]:
    """按牌面值分组 (保持插入顺序)"""
    groups: Dict[int, List[Card]] = {}
    for card in cards:
        groups.setdefault(card.rank, []).append(card)
    return groups


def cards_to_matrix(cards: Iterable[Card]) -> np.ndarray:
    """
    将牌转换为 5×14 的计数矩阵

    行为花色 (spade, heart, diamond, club, joker)，列为牌面值 3..Joker

    Args:
        cards: 牌列表

    Returns:
        (5, 14) int8 数组
    """
    matrix = np.zeros((len(SUIT_TO_ROW), len(RANKS)), dtype=np.int8)
    for card in cards:
        matrix[SUIT_TO_ROW[card.suit], RANK_TO_COLUMN[card.rank]] += 1
    return matrix


def cards_to_array(cards: Iterable[Card]) -> np.ndarray:
    """
    将牌转换为 70 维向量 (按行展开 cards_to_matrix)

    Returns:
        70 维 float32 数组
    """
    return cards_to_matrix(cards).astype(np.float32).flatten()
