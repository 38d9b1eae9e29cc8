"""
Core Layer - 纯游戏逻辑 (无策略)

Modules:
    cards: 牌定义与编码
    combinations: 牌型与牌型生成
    rules: 规则引擎
    state: 场面状态
"""
from .cards import (
    Card,
    Suit,
    Rank,
    RANKS,
    NORMAL_WEIGHT,
    REVOLUTION_WEIGHT,
    make_card,
    build_deck,
    get_rank_weight,
    sort_cards,
    cards_to_str,
    str_to_cards,
    remove_cards,
    group_by_rank,
    cards_to_matrix,
    cards_to_array,
)

from .combinations import (
    CombinationType,
    Combination,
    CombinationGenerator,
    COMBINATION_PRIORITY,
    MIN_SEQUENCE_LEN,
    describe_combination,
    generate_all_combinations,
)

from .rules import RuleEngine

from .state import (
    Controller,
    LastAction,
    FieldState,
    OpponentSummary,
    TableState,
    Participant,
)

__all__ = [
    # cards
    "Card",
    "Suit",
    "Rank",
    "RANKS",
    "NORMAL_WEIGHT",
    "REVOLUTION_WEIGHT",
    "make_card",
    "build_deck",
    "get_rank_weight",
    "sort_cards",
    "cards_to_str",
    "str_to_cards",
    "remove_cards",
    "group_by_rank",
    "cards_to_matrix",
    "cards_to_array",
    # combinations
    "CombinationType",
    "Combination",
    "CombinationGenerator",
    "COMBINATION_PRIORITY",
    "MIN_SEQUENCE_LEN",
    "describe_combination",
    "generate_all_combinations",
    # rules
    "RuleEngine",
    # state
    "Controller",
    "LastAction",
    "FieldState",
    "OpponentSummary",
    "TableState",
    "Participant",
]
