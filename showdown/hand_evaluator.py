from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Sequence, Union

from showdown.cards import Card, CardValue, Hand, parse_hand


class HandCategory(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

# Keyed on histogram counts, largest group first. Covers every way to
# split five cards; (5,) cannot come from a single deck.
CATEGORY_BY_SHAPE = {
    (5,): HandCategory.FOUR_OF_A_KIND,
    (4, 1): HandCategory.FOUR_OF_A_KIND,
    (3, 2): HandCategory.FULL_HOUSE,
    (3, 1, 1): HandCategory.THREE_OF_A_KIND,
    (2, 2, 1): HandCategory.TWO_PAIR,
    (2, 1, 1, 1): HandCategory.ONE_PAIR,
    (1, 1, 1, 1, 1): HandCategory.HIGH_CARD,
}

# Flush and high card compare every card in order, repeats included.
EVERY_CARD = {HandCategory.FLUSH, HandCategory.HIGH_CARD}

# How many leading value groups (in canonical order) decide a tie.
DECISIVE_GROUPS = {
    HandCategory.STRAIGHT_FLUSH: 1,
    HandCategory.STRAIGHT: 1,
    HandCategory.FOUR_OF_A_KIND: 1,
    HandCategory.THREE_OF_A_KIND: 1,
    HandCategory.ONE_PAIR: 1,
    HandCategory.FULL_HOUSE: 2,
    HandCategory.TWO_PAIR: 3,
}

Histogram = list[tuple[CardValue, int]]


class Outcome(Enum):
    FIRST_WINS = "first"
    SECOND_WINS = "second"
    TIE = "tie"


@dataclass(frozen=True)
class Evaluation:
    category: HandCategory
    cards: Hand

    @property
    def label(self) -> str:
        return self.category.label

    def __str__(self) -> str:
        return f"{self.label} [{' '.join(str(c) for c in self.cards)}]"


def histogram(hand: Sequence[Card]) -> Histogram:
    counts = Counter(c.value for c in hand)
    return sorted(counts.items(), key=lambda x: (x[1], x[0]), reverse=True)


def is_flush(hand: Sequence[Card]) -> bool:
    return len(set(c.suit for c in hand)) == 1


def is_straight(hand: Sequence[Card]) -> bool:
    # Ace is high only; A-2-3-4-5 is not a straight here.
    v = sorted(set(c.value for c in hand))
    return len(v) == 5 and v[4] - v[0] == 4


def classify(hand: Sequence[Card], hist: Optional[Histogram] = None) -> HandCategory:
    if hist is None:
        hist = histogram(hand)
    flush = is_flush(hand)
    straight = is_straight(hand)

    if flush and straight:
        return HandCategory.STRAIGHT_FLUSH
    if flush:
        return HandCategory.FLUSH
    if straight:
        return HandCategory.STRAIGHT

    shape = tuple(count for _, count in hist)
    category = CATEGORY_BY_SHAPE.get(shape)
    if category is None:
        raise ValueError(f"Card counts {shape} do not describe a five-card hand")
    return category


def canonical_order(hand: Sequence[Card], hist: Optional[Histogram] = None) -> Hand:
    """Order cards so the ones that decide ties come first.

    Cards sort by the size of their value group, then by value, both
    descending: the quad before its kicker, the higher pair of two pair
    before the lower one.
    """
    if hist is None:
        hist = histogram(hand)
    counts = dict(hist)
    return tuple(sorted(hand, key=lambda c: (counts[c.value], c.value), reverse=True))


def _group_values(cards: Sequence[Card]) -> list[CardValue]:
    seen = []
    for c in cards:
        if c.value not in seen:
            seen.append(c.value)
    return seen


def tiebreak_key(category: HandCategory, cards: Sequence[Card]) -> tuple[int, ...]:
    """Values compared, in order, between two hands of the same category.

    ``cards`` must be canonically ordered. The key is the decisive group
    values followed by any kickers the category counts: the triple then the
    pair for a full house, both pairs then the kicker for two pair, every
    card for a flush or high card.
    """
    if category in EVERY_CARD:
        return tuple(int(c.value) for c in cards)
    groups = _group_values(cards)
    return tuple(int(v) for v in groups[:DECISIVE_GROUPS[category]])


def break_tie(category: HandCategory, cards1: Sequence[Card], cards2: Sequence[Card]) -> Outcome:
    k1 = tiebreak_key(category, cards1)
    k2 = tiebreak_key(category, cards2)
    if k1 > k2:
        return Outcome.FIRST_WINS
    if k1 < k2:
        return Outcome.SECOND_WINS
    return Outcome.TIE


def evaluate_cards(cards: Sequence[Card]) -> Evaluation:
    hist = histogram(cards)
    category = classify(cards, hist)
    return Evaluation(category, canonical_order(cards, hist))


def evaluate(tokens: Union[str, Sequence[str]]) -> Evaluation:
    return evaluate_cards(parse_hand(tokens))


def compare(e1: Evaluation, e2: Evaluation) -> Outcome:
    if e1.category > e2.category:
        return Outcome.FIRST_WINS
    if e1.category < e2.category:
        return Outcome.SECOND_WINS
    return break_tie(e1.category, e1.cards, e2.cards)


def compare_hands(hand1: Union[str, Sequence[str]], hand2: Union[str, Sequence[str]]) -> Outcome:
    return compare(evaluate(hand1), evaluate(hand2))
