from enum import IntEnum, auto

# Enums implement IntEnum to allow for ordering and rank arithmetic.


class Suit(IntEnum):
    """
    Suit is a standard French playing card suit of clubs, diamonds, hearts, or
    spades.
    """

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, s: str) -> 'Suit':
        """Parse a suit from its one-letter code or its full name."""
        s = s.strip().upper()
        for suit in cls:
            if s == suit.name or s == suit.name[:-1] or s == suit.short():
                return suit
        raise ValueError("Not a valid suit: {!r}".format(s))

    def short(self) -> str:
        return self.name[0]

    def black(self) -> bool:
        return self in (Suit.CLUBS, Suit.SPADES)

    def red(self) -> bool:
        return self in (Suit.DIAMONDS, Suit.HEARTS)

    def color(self) -> str:
        return "black" if self.black() else "red"


class Rank(IntEnum):
    """
    Rank is a standard French playing card rank of 1-13, with 1 called Ace and
    11-13 called Jack, Queen, and King.
    """
    ACE = 1
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

    def __str__(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, s: str) -> 'Rank':
        """Parse a rank from its short form (A, 2-10, J, Q, K), its digits, or
        its full name."""
        s = s.strip().upper()
        if s.isdigit():
            return cls(int(s))
        for rank in cls:
            if s == rank.name or s == rank.short():
                return rank
        raise ValueError("Not a valid rank: {!r}".format(s))

    def short(self) -> str:
        if 1 < self.value <= 10:
            return str(self.value)
        else:
            return self.name[0].upper()


class Card:
    """
    Card is the standard playing card with suit of clubs, diamonds, hearts, or
    spades, and rank of Ace through King. Suit and rank are fixed once the
    card is created; only the side facing up can change, via flip().
    """

    def __init__(self, suit: Suit, rank: Rank | int, face_up: bool=False):
        self._suit = Suit(suit)
        self._rank = Rank(rank)
        self._face_up = face_up

    @classmethod
    def parse(cls, s: str, face_up: bool=False) -> 'Card':
        """
        Parse a card from the same short form that str() produces, e.g. "QH"
        or "10C". The suit is always the final character.
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError("Not a valid card: {!r}".format(s))
        return cls(Suit.parse(s[-1]), Rank.parse(s[:-1]), face_up)

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def face_up(self) -> bool:
        return self._face_up

    @property
    def color(self) -> str:
        return self._suit.color()

    def flip(self):
        """Turn the card over."""
        self._face_up = not self._face_up

    def __str__(self) -> str:
        return f"{self.rank.short()}{self.suit.short()}"

    def __repr__(self) -> str:
        return "Card({!s}, {:s})".format(self, "up" if self.face_up else "down")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Card):
            return False

        return self.suit == other.suit and self.rank == other.rank

    def __hash__(self) -> int:
        return hash((self.suit, self.rank))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Card):
            return NotImplemented

        if self.rank == other.rank:
            return self.suit < other.suit
        else:
            return self.rank < other.rank

    def is_black(self) -> bool:
        return self.suit.black()

    def is_red(self) -> bool:
        return self.suit.red()

    def clone(self) -> 'Card':
        return Card(self.suit, self.rank, self.face_up)
