"""
Unit tests for the Card element type and the ComparablePlus mixin.
"""

import random
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.common.card import DECK_COUNT, Card, Rank, Suit, full_deck
from src.common.comparable import ComparablePlus, compare
from src.tree23.tree import Tree23


def test_compare_three_way():
    assert compare(1, 2) < 0
    assert compare(2, 1) > 0
    assert compare(2, 2) == 0
    assert compare("a", "b") < 0


def test_cards_order_by_suit_then_rank():
    assert Card(Rank.ACE, Suit.CLUBS) < Card(Rank.TWO, Suit.DIAMONDS)
    assert Card(Rank.TWO, Suit.HEARTS) < Card(Rank.THREE, Suit.HEARTS)
    assert Card(Rank.KING, Suit.SPADES) > Card(Rank.QUEEN, Suit.SPADES)
    assert Card(Rank.TEN, Suit.CLUBS) <= Card(Rank.TEN, Suit.CLUBS)
    assert Card(Rank.TEN, Suit.CLUBS) >= Card(Rank.TEN, Suit.CLUBS)


def test_named_comparison_helpers():
    low = Card(Rank.TWO, Suit.CLUBS)
    high = Card(Rank.ACE, Suit.SPADES)
    assert low.less_than(high)
    assert high.greater_than(low)
    assert low.less_than_equal_to(low)
    assert high.greater_than_equal_to(high)
    assert low.equal_to(Card(Rank.TWO, Suit.CLUBS))
    assert low.not_equal_to(high)


def test_card_equality_and_hash():
    a = Card(Rank.FIVE, Suit.HEARTS)
    b = Card.from_ordinals(3, 2)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_card_str():
    assert str(Card(Rank.QUEEN, Suit.DIAMONDS)) == "Queen of Diamonds"


def test_full_deck_is_sorted_and_complete():
    deck = full_deck()
    assert len(deck) == DECK_COUNT == 52
    assert deck == sorted(deck)
    assert len(set(deck)) == 52


def test_comparing_with_other_type_raises():
    try:
        Card(Rank.TWO, Suit.CLUBS) < 3
        assert False, "Should have raised TypeError"
    except TypeError:
        pass


def test_compare_to_must_be_implemented():
    class Bare(ComparablePlus):
        pass

    try:
        Bare() < Bare()
        assert False, "Should have raised NotImplementedError"
    except NotImplementedError:
        pass


def test_shuffled_deck_in_tree_comes_back_sorted():
    deck = full_deck()
    shuffled = list(deck)
    random.Random(5).shuffle(shuffled)
    tree = Tree23(shuffled)
    assert tree.size() == 52
    assert list(tree) == deck
    assert tree.find_min() == Card(Rank.TWO, Suit.CLUBS)
    assert tree.find_max() == Card(Rank.ACE, Suit.SPADES)
    assert tree.add(Card(Rank.SEVEN, Suit.HEARTS)) is False

    hearts = list(tree.in_order(lambda card: card.suit == Suit.HEARTS))
    assert hearts == [Card(rank, Suit.HEARTS) for rank in Rank]

    for card in shuffled[:26]:
        assert tree.remove(card) is True
    assert list(tree) == sorted(shuffled[26:])


if __name__ == "__main__":
    test_functions = [
        obj for name, obj in list(globals().items())
        if name.startswith("test_") and callable(obj)
    ]
    passed = 0
    failed = 0
    for test_fn in test_functions:
        try:
            test_fn()
            passed += 1
            print(f"  PASS: {test_fn.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test_fn.__name__}: {e}")

    print(f"\n{'='*60}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")
    if failed == 0:
        print("All tests passed!")
    else:
        print("Some tests failed!")
        sys.exit(1)
