"""Card builders shared by the tests."""

from icelatro.engine.deck import Card, Suit

SUIT_SYMBOLS = {s.value: s for s in Suit}


def card(text: str, uid: str = "") -> Card:
    """Build a card from text like "10♠"; the id defaults to the text."""
    value, symbol = text[:-1], text[-1]
    return Card(value, SUIT_SYMBOLS[symbol], uid or text)


def cards(*texts: str) -> list[Card]:
    return [card(t) for t in texts]
