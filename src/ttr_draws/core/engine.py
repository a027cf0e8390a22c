"""Opening deal of a game, reproduced from the seed alone."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import structlog

from .europe import EuropeMap, Ticket
from .lcg import MinStdRand
from .sampler import UniformScheme
from .trains import FaceUp, Train, TrainDeck

LOGGER = structlog.get_logger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 5
STARTING_HAND = 4
STARTING_TRAINS = 45

# The game engine folds raw output without the -1 shift.
SETUP_SCHEME = UniformScheme.ENGINE


@dataclass(slots=True)
class Player:
    id: int
    hand: List[Train] = field(default_factory=list)
    ticket_options: List[Ticket] = field(default_factory=list)
    trains: int = STARTING_TRAINS


@dataclass
class GameSetup:
    """Everything dealt before the first turn.

    A single engine is consumed in a fixed order: the ticket piles (big
    tickets first), the face-up display including any rainbow re-deals, then
    four cards per player in seat order.
    """

    seed: int
    scheme: UniformScheme
    engine: MinStdRand
    tickets: EuropeMap
    deck: TrainDeck
    face_up: FaceUp
    players: List[Player]

    @classmethod
    def deal(cls, seed: int, players: int = MIN_PLAYERS, *, scheme: UniformScheme = SETUP_SCHEME) -> "GameSetup":
        if not MIN_PLAYERS <= players <= MAX_PLAYERS:
            raise ValueError(f"Players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, received {players}")

        engine = MinStdRand(seed)
        tickets = EuropeMap.shuffled(engine, scheme)
        deck = TrainDeck(scheme=scheme)
        face_up = FaceUp.deal(engine, deck)
        if face_up.redeals:
            LOGGER.info("setup.redeal", seed=seed, redeals=face_up.redeals)

        seats = []
        for seat in range(players):
            seats.append(Player(id=seat, hand=deck.deal(engine, STARTING_HAND)))
        for player, options in zip(seats, tickets.initial_tickets(players)):
            player.ticket_options = options

        LOGGER.debug("setup.dealt", seed=seed, players=players, draws=engine.calls, deck=len(deck))
        return cls(
            seed=seed,
            scheme=scheme,
            engine=engine,
            tickets=tickets,
            deck=deck,
            face_up=face_up,
            players=seats,
        )
