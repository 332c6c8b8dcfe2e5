class RulesError(Exception):
    """A move was refused by the rules engine."""
    pass


class PileIndexError(RulesError):
    """An index addressed a pile or a card that does not exist."""
    pass


class EmptyPileError(RulesError):
    """The pile a move takes from has no card to act on."""
    pass


class IllegalMoveError(RulesError):
    """The move exists, but Klondike rules do not allow it right now."""
    pass


from .card import Card, Rank, Suit  # noqa: E402
from .deck import Deck  # noqa: E402
from .foundation import FoundationPile  # noqa: E402
from .solitaire import Solitaire  # noqa: E402

__all__ = [
    'Card',
    'Deck',
    'EmptyPileError',
    'FoundationPile',
    'IllegalMoveError',
    'PileIndexError',
    'Rank',
    'RulesError',
    'Solitaire',
    'Suit',
]
