import logging
import random

from typing import Callable

from . import RulesError, PileIndexError, EmptyPileError, IllegalMoveError
from .card import Card, Rank, Suit
from .deck import Deck
from .foundation import FoundationPile

logger = logging.getLogger(__name__)


TABLEAU_PILE_COUNT = 7


def can_add_to_foundation(card: Card, foundation: FoundationPile) -> bool:
    """
    Return whether card is the next card for foundation: same suit, and exactly
    one rank above the highest card already there.
    """
    return card.suit == foundation.suit and card.rank == foundation.value + 1


def can_add_to_tableau(card: Card, pile: list[Card]) -> bool:
    """
    Return whether card may be placed on top of the tableau pile. Only a King
    may start an empty pile. Otherwise the card must be the opposite color of
    the current top card and exactly one rank below it; nothing can go on an
    Ace.
    """
    if len(pile) == 0:
        return card.rank == Rank.KING

    top = pile[-1]

    if top.rank == Rank.ACE:
        return False
    if top.color == card.color:
        return False
    if top.rank != card.rank + 1:
        return False

    return True


class Solitaire:
    """
    The rules engine for a game of Klondike Solitaire. It owns the deck, the
    four foundation piles and the seven tableau piles, and is the only thing
    that changes them.

    Every move returns True if it was made and False if it was refused. A
    refused move leaves the game exactly as it was; the reason is kept in
    last_error.
    """

    def __init__(self, seed: int | str | None=None, rng: random.Random | None=None):
        """
        Create a new engine. Deals are reproducible when seed is given, or when
        a seeded rng is passed in. Call new_game() before playing.
        """
        if rng is None:
            rng = random.Random(seed)

        self._deck = Deck(rng)
        self._foundations: dict[Suit, FoundationPile] = {s: FoundationPile(s) for s in Suit}
        self._tableau: list[list[Card]] = [[] for _ in range(TABLEAU_PILE_COUNT)]
        self.last_error: RulesError | None = None

    @property
    def draw_pile(self) -> list[Card]:
        return self._deck.draw_pile

    @property
    def discard_pile(self) -> list[Card]:
        return self._deck.discard_pile

    @property
    def tableau_piles(self) -> list[list[Card]]:
        return self._tableau

    @property
    def foundation_piles(self) -> list[FoundationPile]:
        """
        The four foundation piles in Suit order: clubs, diamonds, hearts,
        spades. Use foundation(suit) to look one up by suit.
        """
        return list(self._foundations.values())

    def foundation(self, suit: Suit) -> FoundationPile:
        return self._foundations[suit]

    @property
    def won_game(self) -> bool:
        return all(f.complete for f in self._foundations.values())

    def new_game(self) -> bool:
        """
        Shuffle a fresh deck and deal a new game. Pile i of the tableau gets
        i+1 cards with only the last one face-up; the rest stay in the draw
        pile. The piles are refilled in place.
        """
        self._deck.reset()
        for f in self._foundations.values():
            f.reset()
        for pile in self._tableau:
            pile.clear()

        # deal in rounds, one card to each pile from the round's own pile on
        for i in range(TABLEAU_PILE_COUNT):
            for j in range(i, TABLEAU_PILE_COUNT):
                c = self._deck.draw()
                if j == i:
                    c.flip()
                self._tableau[j].append(c)

        self.last_error = None
        logger.info("Dealt new game; %d cards left in the draw pile", len(self._deck.draw_pile))
        return True

    def draw_card(self) -> bool:
        """Turn the top card of the draw pile face-up onto the discard pile."""
        return self._attempt(self._draw_card)

    def shuffle_discard_pile(self) -> bool:
        """Recycle the discard pile into the draw pile once it has run out."""
        return self._attempt(self._shuffle_discard_pile)

    def play_discard_pile_to_foundation(self) -> bool:
        return self._attempt(self._play_discard_pile_to_foundation)

    def play_discard_pile_card_to_tableau(self, target_tableau_index: int) -> bool:
        return self._attempt(self._play_discard_pile_card_to_tableau, target_tableau_index)

    def move_tableau_card_to_foundation(self, tableau_index: int) -> bool:
        return self._attempt(self._move_tableau_card_to_foundation, tableau_index)

    def move_tableau_cards_to_another_tableau(self, source_tableau_index: int, card_index: int, target_tableau_index: int) -> bool:
        """
        Move the card at card_index in the source pile, along with every card
        on top of it, onto the target pile. Only the first card moved is
        checked against the target; the cards above it are already a run.
        """
        return self._attempt(self._move_tableau_cards_to_another_tableau, source_tableau_index, card_index, target_tableau_index)

    def flip_top_tableau_card(self, tableau_index: int) -> bool:
        """Turn over a face-down card left on top of a tableau pile."""
        return self._attempt(self._flip_top_tableau_card, tableau_index)

    def _attempt(self, move: Callable[..., None], *args) -> bool:
        try:
            move(*args)
        except RulesError as e:
            self.last_error = e
            logger.debug("Refused %s%r: %s", move.__name__.lstrip('_'), args, e)
            return False

        self.last_error = None
        logger.debug("Made %s%r", move.__name__.lstrip('_'), args)
        return True

    # The moves below check everything before they change anything, so a
    # RulesError always leaves the game untouched.

    def _draw_card(self):
        c = self._deck.draw()
        if c is None:
            raise EmptyPileError("Draw pile is empty")
        if not c.face_up:
            c.flip()
        self._deck.push_discard(c)

    def _shuffle_discard_pile(self):
        if len(self._deck.draw_pile) != 0:
            raise IllegalMoveError("Cannot shuffle the discard pile back in while {:d} cards remain in the draw pile".format(len(self._deck.draw_pile)))
        self._deck.shuffle_in_discard_pile()

    def _play_discard_pile_to_foundation(self):
        card = self._deck.peek_discard()
        if card is None:
            raise EmptyPileError("Discard pile is empty")

        f = self._check_foundation_move(card)
        f.add_card()
        self._deck.pop_discard()

    def _play_discard_pile_card_to_tableau(self, target_tableau_index: int):
        pile = self._tableau_pile(target_tableau_index)

        card = self._deck.peek_discard()
        if card is None:
            raise EmptyPileError("Discard pile is empty")

        self._check_tableau_move(card, target_tableau_index)
        pile.append(card)
        self._deck.pop_discard()

    def _move_tableau_card_to_foundation(self, tableau_index: int):
        pile = self._tableau_pile(tableau_index)
        if len(pile) == 0:
            raise EmptyPileError("tableau[{:d}] is empty".format(tableau_index))

        card = pile[-1]
        if not card.face_up:
            raise IllegalMoveError("Top card of tableau[{:d}] is face-down".format(tableau_index))

        f = self._check_foundation_move(card)
        f.add_card()
        pile.pop()

    def _move_tableau_cards_to_another_tableau(self, source_tableau_index: int, card_index: int, target_tableau_index: int):
        source = self._tableau_pile(source_tableau_index)
        target = self._tableau_pile(target_tableau_index)
        if source_tableau_index == target_tableau_index:
            raise IllegalMoveError("Source and destination piles must be different")

        if not 0 <= card_index < len(source):
            raise PileIndexError("tableau[{:d}] has no card at index {}".format(source_tableau_index, card_index))

        card = source[card_index]
        if not card.face_up:
            raise IllegalMoveError("Cannot move face-down card at index {:d} of tableau[{:d}]".format(card_index, source_tableau_index))

        self._check_tableau_move(card, target_tableau_index)

        run = source[card_index:]
        del source[card_index:]
        target.extend(run)

    def _flip_top_tableau_card(self, tableau_index: int):
        pile = self._tableau_pile(tableau_index)
        if len(pile) == 0:
            raise EmptyPileError("tableau[{:d}] is empty".format(tableau_index))

        card = pile[-1]
        if card.face_up:
            raise IllegalMoveError("Top card of tableau[{:d}] is already face-up".format(tableau_index))

        card.flip()

    def _tableau_pile(self, index: int) -> list[Card]:
        if not 0 <= index < len(self._tableau):
            raise PileIndexError("Invalid tableau pile {}; legal piles are 0 through {:d}".format(index, len(self._tableau)-1))
        return self._tableau[index]

    def _check_foundation_move(self, card: Card) -> FoundationPile:
        f = self._foundations[card.suit]
        if not can_add_to_foundation(card, f):
            expected = f.needs()
            raise IllegalMoveError("Cannot add {:s} to {:s} foundation pile; legal card is {:s}".format(str(card), f.suit.name.lower(), str(expected) if expected is not None else 'none'))
        return f

    def _check_tableau_move(self, card: Card, target_tableau_index: int):
        pile = self._tableau[target_tableau_index]
        if not can_add_to_tableau(card, pile):
            if len(pile) == 0:
                raise IllegalMoveError("Cannot add {:s} to empty tableau[{:d}]; only a King may start a pile".format(str(card), target_tableau_index))
            raise IllegalMoveError("Cannot add {:s} to tableau[{:d}] on top of {:s}".format(str(card), target_tableau_index, str(pile[-1])))

    def board(self, reveal_hidden: bool=False) -> str:
        """
        Return a string representation of the current state of the board. This
        is useful for debugging and for showing a deal on the command line.
        """

        card_width = 3
        border_width = 1
        empty_char = '░'
        back_char = '▒'

        board = ''

        # add foundation piles over the last four tableau columns
        foundation_offset = (card_width + border_width) * 3
        board += ' ' * foundation_offset
        for f in self.foundation_piles:
            top = f.top()
            if top is None:
                board += empty_char * (card_width - 1) + f.suit.short()
            else:
                board += str(top).rjust(card_width)
            board += ' ' * border_width
        board += '\n'

        # add a blank line
        board += '\n'

        for i in range(len(self._tableau)):
            board += ("T" + str(i)).ljust(card_width) + ' ' * border_width
        board += '\n'

        # tableau piles run downwards, bottom card first
        tallest_pile = max(len(t) for t in self._tableau)
        for i in range(max(tallest_pile, 1)):
            for t in self._tableau:
                if len(t) <= i:
                    if i == 0:
                        board += empty_char * card_width
                    else:
                        board += ' ' * card_width
                elif t[i].face_up or reveal_hidden:
                    board += str(t[i]).rjust(card_width)
                else:
                    board += back_char * card_width
                board += ' ' * border_width
            board += '\n'

        # empty line
        board += '\n'

        # draw and discard
        board += '|'
        if len(self.draw_pile) > 0:
            board += str(len(self.draw_pile)).zfill(2).rjust(card_width)
        else:
            board += empty_char * card_width
        board += '| TOP:'
        top = self._deck.peek_discard()
        if top is not None:
            board += str(top)
        else:
            board += empty_char * card_width
        board += '\n'

        if self.won_game:
            board += "(GAME WON)\n"

        return board

    def __str__(self) -> str:
        return self.board()
