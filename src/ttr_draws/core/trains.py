"""Train cards, the draw deck and the face-up display."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

import structlog

from .pool import Pool
from .routines import pick_one
from .sampler import DEFAULT_SCHEME, Engine, UniformScheme

LOGGER = structlog.get_logger(__name__)

DECK_SIZE = 110
CARDS_PER_COLOUR = 12
FACE_UP_SLOTS = 5
MAX_FACE_UP_RAINBOWS = 2


class Colour(str, Enum):
    """Card colours in deck order."""

    PINK = "Pink"
    WHITE = "White"
    BLUE = "Blue"
    YELLOW = "Yellow"
    ORANGE = "Orange"
    BLACK = "Black"
    RED = "Red"
    GREEN = "Green"
    RAINBOW = "Rainbow"

    @property
    def rank(self) -> int:
        return _COLOUR_ORDER.index(self)


_COLOUR_ORDER: List[Colour] = list(Colour)


class DeckExhaustedError(RuntimeError):
    """Raised when a card is requested from an empty draw pile."""


@dataclass(frozen=True, order=True)
class Train:
    """A single train card identified by its deck position ``0..109``."""

    id: int

    def __post_init__(self) -> None:
        if not 0 <= self.id < DECK_SIZE:
            raise ValueError(f"Train id must be in [0, {DECK_SIZE}), received {self.id}")

    @property
    def colour(self) -> Colour:
        # Eight colours of 12 cards each; the remaining 14 are locomotives.
        block = self.id // CARDS_PER_COLOUR
        if block >= Colour.RAINBOW.rank:
            return Colour.RAINBOW
        return _COLOUR_ORDER[block]

    def __repr__(self) -> str:
        return f"{self.colour.value}({self.id})"


@dataclass
class TrainDeck:
    """Draw pile plus discard pile. Cards are dealt by uniform position."""

    scheme: UniformScheme = DEFAULT_SCHEME
    pile: Pool = field(default_factory=lambda: Pool.consecutive(DECK_SIZE))
    discards: List[Train] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pile)

    def deal_one(self, engine: Engine) -> Train:
        if not len(self.pile):
            raise DeckExhaustedError("The train deck is empty")
        return Train(pick_one(engine, self.pile, self.scheme))

    def deal(self, engine: Engine, count: int) -> List[Train]:
        return [self.deal_one(engine) for _ in range(count)]

    def discard(self, cards: Iterable[Train]) -> None:
        self.discards.extend(cards)


@dataclass
class FaceUp:
    """The five visible cards.

    Whenever three or more locomotives are showing, all five are discarded
    and a fresh five are dealt.
    """

    cards: List[Train]
    redeals: int = 0

    @classmethod
    def deal(cls, engine: Engine, deck: TrainDeck) -> "FaceUp":
        display = cls(deck.deal(engine, FACE_UP_SLOTS))
        display._check_rainbows(engine, deck)
        return display

    @property
    def rainbows(self) -> int:
        return sum(1 for card in self.cards if card.colour is Colour.RAINBOW)

    def _check_rainbows(self, engine: Engine, deck: TrainDeck) -> None:
        while self.rainbows > MAX_FACE_UP_RAINBOWS:
            LOGGER.debug("faceup.redeal", cards=[card.id for card in self.cards])
            deck.discard(self.cards)
            self.cards = deck.deal(engine, FACE_UP_SLOTS)
            self.redeals += 1

    def take(self, engine: Engine, deck: TrainDeck, slot: int) -> Train:
        """Take the card in ``slot``, refill it from the deck and re-check."""
        if not 0 <= slot < FACE_UP_SLOTS:
            raise IndexError(f"Face-up slot must be in [0, {FACE_UP_SLOTS}), received {slot}")
        taken = self.cards[slot]
        self.cards[slot] = deck.deal_one(engine)
        self._check_rainbows(engine, deck)
        return taken
