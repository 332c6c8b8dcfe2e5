from .card import Card, Rank, Suit


class FoundationPile:
    """
    Ultimate destination for all cards of a given suit. Cards arrive in strict
    order from Ace to King, so the pile only needs to remember how many it has
    taken; value is the rank of the highest card placed, or 0 when empty.
    """

    def __init__(self, suit: Suit):
        self._suit = suit
        self.value = 0

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def complete(self) -> bool:
        return self.value == Rank.KING.value

    def reset(self):
        self.value = 0

    def add_card(self):
        """
        Record one more card on the pile. This does no checking of its own;
        callers must already have confirmed the card is the one given by
        needs().
        """
        self.value += 1

    def needs(self) -> Card | None:
        """Return the card this pile will take next, or None once complete."""
        if self.complete:
            return None
        return Card(self._suit, self.value + 1)

    def top(self) -> Card | None:
        """A face-up copy of the highest card on the pile, or None if empty."""
        if self.value == 0:
            return None
        return Card(self._suit, self.value, face_up=True)

    def __len__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return "{:s} foundation ({:d})".format(self._suit.name.lower(), self.value)
