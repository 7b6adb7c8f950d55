from typing import Optional


class ParseError(ValueError):
    """Raised when input cannot be turned into a valid hand."""


class InvalidCardToken(ParseError):
    def __init__(self, token: str, reason: Optional[str] = None):
        self.token = token
        self.reason = reason
        msg = f"Invalid card token: {token!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)

    def __reduce__(self):
        return type(self), (self.token, self.reason)


class InvalidHandSize(ParseError):
    def __init__(self, count: int, expected: int = 5):
        self.count = count
        self.expected = expected
        super().__init__(f"Hand must be exactly {expected} cards, got {count}")

    def __reduce__(self):
        return type(self), (self.count, self.expected)


class InvalidBatchRecord(ParseError):
    def __init__(self, line_no: int, reason: str):
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"Line {line_no}: {reason}")

    def __reduce__(self):
        return type(self), (self.line_no, self.reason)


class DuplicateCard(ParseError):
    def __init__(self, cards):
        self.cards = tuple(cards)
        listed = " ".join(str(c) for c in self.cards)
        super().__init__(f"Duplicate card(s): {listed}")

    def __reduce__(self):
        return type(self), (self.cards,)
