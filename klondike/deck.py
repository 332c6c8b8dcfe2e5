import logging
import random

from . import card

logger = logging.getLogger(__name__)


class Deck:
    """
    The 52 cards of a game that are not currently in play on the foundations or
    the tableau, split between the draw pile and the discard pile. For both
    piles the top card is the last element of the list.

    The piles are exposed for reading, but only the methods here should change
    them so that no card is ever duplicated or lost.
    """

    def __init__(self, rng: random.Random | None=None):
        """
        Create a new, empty deck. Call reset() to fill it before use. If rng is
        not given, a freshly seeded random.Random is used for shuffling.
        """
        if rng is None:
            rng = random.Random()

        self.rng = rng
        self._draw_pile: list[card.Card] = []
        self._discard_pile: list[card.Card] = []

    def __str__(self) -> str:
        return "Deck(draw={:d}, discard={:d})".format(len(self._draw_pile), len(self._discard_pile))

    def __repr__(self) -> str:
        return f"Deck(draw={self._draw_pile!r}, discard={self._discard_pile!r})"

    def __len__(self) -> int:
        return len(self._draw_pile) + len(self._discard_pile)

    @property
    def draw_pile(self) -> list[card.Card]:
        """The face-down cards left to draw. The next card drawn is last."""
        return self._draw_pile

    @property
    def discard_pile(self) -> list[card.Card]:
        """The drawn cards not yet played. The visible card is last."""
        return self._discard_pile

    def reset(self):
        """
        Put a complete, face-down 52-card set into the draw pile in a random
        order and empty the discard pile.
        """
        self._discard_pile.clear()
        self._draw_pile.clear()
        self._draw_pile.extend(card.Card(s, r) for s in card.Suit for r in card.Rank)
        self.shuffle()

    def shuffle(self):
        """Shuffle the draw pile."""
        self.rng.shuffle(self._draw_pile)

    def draw(self) -> card.Card | None:
        """
        Remove and return the top card of the draw pile, or None if it is
        empty. The card is returned the same way up it was in the pile.
        """
        if len(self._draw_pile) < 1:
            return None
        return self._draw_pile.pop()

    def shuffle_in_discard_pile(self):
        """
        Turn the discard pile back into the draw pile: every card is turned
        face-down and the order is randomized. Only allowed once the draw pile
        has run out.
        """
        if len(self._draw_pile) > 0:
            raise ValueError("Cannot recycle discard pile; {:d} cards are still in the draw pile".format(len(self._draw_pile)))

        for c in self._discard_pile:
            if c.face_up:
                c.flip()

        self._draw_pile.extend(self._discard_pile)
        self._discard_pile.clear()
        self.shuffle()
        logger.info("Shuffled %d discarded cards back into the draw pile", len(self._draw_pile))

    def push_discard(self, c: card.Card):
        """Put a card on top of the discard pile."""
        self._discard_pile.append(c)

    def peek_discard(self) -> card.Card | None:
        """The top card of the discard pile or None if the pile is empty."""
        return self._discard_pile[-1] if len(self._discard_pile) > 0 else None

    def pop_discard(self) -> card.Card:
        """Remove and return the top card of the discard pile."""
        if len(self._discard_pile) < 1:
            raise ValueError("No cards left in the discard pile")
        return self._discard_pile.pop()
