"""规则引擎测试"""
import pytest

from core.cards import Rank, str_to_cards
from core.combinations import Combination, CombinationType, generate_all_combinations
from core.rules import RuleEngine
from core.state import FieldState


def field_with(combination_type, cards, revolution=False, passes_in_row=0):
    combo = Combination.build(combination_type, str_to_cards(cards), revolution)
    return FieldState(current_combination=combo, revolution=revolution, passes_in_row=passes_in_row)


def combo_of(combination_type, cards, revolution=False):
    return Combination.build(combination_type, str_to_cards(cards), revolution)


class TestBeats:
    """大小比较测试"""

    def test_higher_single(self):
        assert RuleEngine.beats(combo_of(CombinationType.SINGLE, "QH"),
                                combo_of(CombinationType.SINGLE, "JS"), False) is True

    def test_lower_single(self):
        assert RuleEngine.beats(combo_of(CombinationType.SINGLE, "3C"),
                                combo_of(CombinationType.SINGLE, "JS"), False) is False

    def test_equal_rank_does_not_beat(self):
        assert RuleEngine.beats(combo_of(CombinationType.SINGLE, "JH"),
                                combo_of(CombinationType.SINGLE, "JS"), False) is False

    def test_revolution_inverts(self):
        assert RuleEngine.beats(combo_of(CombinationType.SINGLE, "3C", True),
                                combo_of(CombinationType.SINGLE, "JS", True), True) is True

    def test_joker_stays_strongest_in_revolution(self):
        assert RuleEngine.beats(combo_of(CombinationType.SINGLE, "JK", True),
                                combo_of(CombinationType.SINGLE, "3S", True), True) is True

    def test_different_types(self):
        assert RuleEngine.beats(combo_of(CombinationType.PAIR, "9C 9D"),
                                combo_of(CombinationType.SINGLE, "3S"), False) is False

    def test_different_lengths(self):
        assert RuleEngine.beats(combo_of(CombinationType.SEQUENCE, "6H 7H 8H 9H"),
                                combo_of(CombinationType.SEQUENCE, "3S 4S 5S"), False) is False

    def test_bomb_beats_non_bomb(self):
        assert RuleEngine.beats(combo_of(CombinationType.BOMB, "4S 4H 4D 4C"),
                                combo_of(CombinationType.SINGLE, "JK"), False) is True

    def test_bomb_vs_bomb(self):
        low = combo_of(CombinationType.BOMB, "4S 4H 4D 4C")
        high = combo_of(CombinationType.BOMB, "8S 8H 8D 8C")
        assert RuleEngine.beats(high, low, False) is True
        assert RuleEngine.beats(low, high, False) is False


class TestFilterLegal:
    """合法性过滤测试"""

    @pytest.mark.parametrize("hand", ["5H 6H 7H 9C 9D", "3S 3H 3D 3C 4S 5S 6S", "JK 2S"])
    @pytest.mark.parametrize("revolution", [False, True])
    def test_open_field_returns_everything(self, hand, revolution):
        combos = generate_all_combinations(str_to_cards(hand), revolution)
        legal = RuleEngine.filter_legal(combos, FieldState(revolution=revolution))
        assert legal == combos

    def test_no_legal_move(self):
        field = field_with(CombinationType.SINGLE, "JS", passes_in_row=1)
        assert RuleEngine.legal_combinations(str_to_cards("3C 4D"), field) == []

    def test_higher_single_legal(self):
        field = field_with(CombinationType.SINGLE, "JS")
        legal = RuleEngine.legal_combinations(str_to_cards("3C QH"), field)
        assert len(legal) == 1
        assert legal[0].top_card.rank == Rank.QUEEN

    def test_revolution_field(self):
        field = field_with(CombinationType.SINGLE, "JS", revolution=True)
        legal = RuleEngine.legal_combinations(str_to_cards("3C QH"), field)
        assert [c.top_card.rank for c in legal] == [3]

    def test_sequence_length_must_match(self):
        field = field_with(CombinationType.SEQUENCE, "3S 4S 5S")
        legal = RuleEngine.legal_combinations(str_to_cards("6H 7H 8H 9H"), field)
        # 678, 789 (6789 长度不同)
        assert len(legal) == 2
        assert all(len(c) == 3 for c in legal)

    def test_bomb_over_single(self):
        field = field_with(CombinationType.SINGLE, "2S")
        legal = RuleEngine.legal_combinations(str_to_cards("4S 4H 4D 4C"), field)
        assert len(legal) == 1
        assert legal[0].is_bomb

    def test_only_higher_bombs_over_bomb(self):
        field = field_with(CombinationType.BOMB, "5S 5H 5D 5C")
        hand = str_to_cards("8S 8H 8D 8C 3S 3H 3D 3C 9S")
        legal = RuleEngine.legal_combinations(hand, field)
        assert len(legal) == 1
        assert legal[0].is_bomb
        assert legal[0].top_card.rank == 8

    @pytest.mark.parametrize("revolution", [False, True])
    def test_bomb_field_property(self, revolution):
        field = field_with(CombinationType.BOMB, "9S 9H 9D 9C", revolution=revolution)
        hand = str_to_cards("3S 3H 3D 3C QS QH QD QC 4S 5S 6S 7D 7H")
        current = field.current_combination
        for combo in RuleEngine.legal_combinations(hand, field):
            assert combo.is_bomb
            assert len(combo) == 4
            assert combo.strength > current.strength

    def test_can_beat(self):
        field = field_with(CombinationType.PAIR, "5S 5H")
        assert RuleEngine.can_beat(str_to_cards("7C 7D"), field) is True
        assert RuleEngine.can_beat(str_to_cards("3C 3D 7C"), field) is False
        assert RuleEngine.can_beat([], FieldState()) is False
