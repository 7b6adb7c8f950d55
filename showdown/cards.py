from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Sequence, Union

from showdown.errors import InvalidCardToken, InvalidHandSize

HAND_SIZE = 5


class CardValue(IntEnum):
    TWO = 2
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

    @property
    def char(self) -> str:
        return RANKS[self - CardValue.TWO]


class Suit(Enum):
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"


RANKS = "23456789TJQKA"
SUITS = "HDCS"
RANK_VALUES = {
    "2": CardValue.TWO,
    "3": CardValue.THREE,
    "4": CardValue.FOUR,
    "5": CardValue.FIVE,
    "6": CardValue.SIX,
    "7": CardValue.SEVEN,
    "8": CardValue.EIGHT,
    "9": CardValue.NINE,
    "T": CardValue.TEN,
    "J": CardValue.JACK,
    "Q": CardValue.QUEEN,
    "K": CardValue.KING,
    "A": CardValue.ACE,
}
SUIT_CODES = {
    "H": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "S": Suit.SPADES,
}
SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}
_SUIT_ORDER = {s: i for i, s in enumerate(Suit)}


@dataclass(frozen=True)
class Card:
    value: CardValue
    suit: Suit

    def __str__(self) -> str:
        return f"{self.value.char}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def pretty(self) -> str:
        return f"{self.value.char}{SUIT_SYMBOLS[self.suit]}"

    def sort_key(self) -> tuple[int, int]:
        return (int(self.value), _SUIT_ORDER[self.suit])

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() < other.sort_key()


Hand = tuple[Card, ...]


def parse_card(token: str, suit: Optional[str] = None) -> Card:
    """Parse a two-character token such as ``"AS"`` or ``"TD"``.

    The rank and suit may also be passed separately. Matching is
    case-sensitive; a double-quoted token is accepted and unquoted.
    """
    if suit is not None:
        rank_char, suit_char = token, suit
        raw = f"{token}{suit}"
    else:
        raw = token
        stripped = token.strip().strip('"')
        if len(stripped) != 2:
            raise InvalidCardToken(raw)
        rank_char, suit_char = stripped[0], stripped[1]

    value = RANK_VALUES.get(rank_char)
    if value is None:
        raise InvalidCardToken(raw, f"unknown rank {rank_char!r}")
    suit_enum = SUIT_CODES.get(suit_char)
    if suit_enum is None:
        raise InvalidCardToken(raw, f"unknown suit {suit_char!r}")
    return Card(value, suit_enum)


def parse_hand_tokens(hand: Union[str, Sequence[str]]) -> list[str]:
    if isinstance(hand, str):
        return hand.split()
    return list(hand)


def parse_hand(hand: Union[str, Sequence[str]]) -> Hand:
    tokens = parse_hand_tokens(hand)
    if len(tokens) != HAND_SIZE:
        raise InvalidHandSize(len(tokens))
    return tuple(parse_card(t) for t in tokens)
