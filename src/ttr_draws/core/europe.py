"""Europe board: cities, destination tickets and the ticket draw piles.

Ticket ids double as positions in the ticket pools used by the draw
procedures, so the order of ``TICKETS`` is significant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import structlog

from .routines import repeated_pick_shuffle
from .sampler import DEFAULT_SCHEME, Engine, UniformScheme

LOGGER = structlog.get_logger(__name__)

BIG_TICKET_VALUE = 20
SMALLS_PER_PLAYER = 3


@dataclass(frozen=True)
class City:
    id: int
    name: str


@dataclass(frozen=True)
class Ticket:
    """A destination ticket between two cities worth ``value`` points."""

    id: int
    city0: City
    city1: City
    value: int

    @property
    def is_big(self) -> bool:
        return self.value >= BIG_TICKET_VALUE

    def __str__(self) -> str:
        return f"{self.city0.name} - {self.city1.name} ({self.value})"


_CITY_NAMES: Tuple[str, ...] = (
    "Amsterdam",
    "Angora",
    "Athina",
    "Barcelona",
    "Berlin",
    "Brest",
    "Brindisi",
    "Bruxelles",
    "Bucuresti",
    "Budapest",
    "Cadiz",
    "Constantinople",
    "Danzic",
    "Dieppe",
    "Edinburgh",
    "Erzurum",
    "Essen",
    "Frankfurt",
    "Kharkov",
    "Kobenhavn",
    "Kyiv",
    "Lisboa",
    "London",
    "Madrid",
    "Marseille",
    "Moskva",
    "Munchen",
    "Palermo",
    "Pamplona",
    "Paris",
    "Petrograd",
    "Riga",
    "Roma",
    "Rostov",
    "Sarajevo",
    "Sevastopol",
    "Smolensk",
    "Smyrna",
    "Sochi",
    "Sofia",
    "Stockholm",
    "Venezia",
    "Venizia",
    "Warszawa",
    "Wien",
    "Wilno",
    "Zagrab",
    "Zagreb",
    "Zurich",
)

CITIES: Tuple[City, ...] = tuple(City(id=index, name=name) for index, name in enumerate(_CITY_NAMES))
_CITIES_BY_NAME: Dict[str, City] = {city.name: city for city in CITIES}

_TICKET_ROUTES: Tuple[Tuple[str, str, int], ...] = (
    ("Amsterdam", "Pamplona", 7),
    ("Amsterdam", "Wilno", 12),
    ("Angora", "Kharkov", 10),
    ("Athina", "Angora", 5),
    ("Athina", "Wilno", 11),
    ("Barcelona", "Bruxelles", 8),
    ("Barcelona", "Munchen", 8),
    ("Berlin", "Bucuresti", 8),
    ("Berlin", "Moskva", 12),
    ("Berlin", "Roma", 9),
    ("Brest", "Marseille", 7),
    ("Brest", "Petrograd", 20),
    ("Brest", "Venezia", 8),
    ("Bruxelles", "Danzic", 9),
    ("Budapest", "Sofia", 5),
    ("Cadiz", "Stockholm", 21),
    ("Edinburgh", "Athina", 21),
    ("Edinburgh", "Paris", 7),
    ("Essen", "Kyiv", 10),
    ("Frankfurt", "Kobenhavn", 5),
    ("Frankfurt", "Smolensk", 13),
    ("Kobenhavn", "Erzurum", 21),
    ("Kyiv", "Petrograd", 6),
    ("Kyiv", "Sochi", 8),
    ("Lisboa", "Danzic", 20),
    ("London", "Berlin", 7),
    ("London", "Wien", 10),
    ("Madrid", "Dieppe", 8),
    ("Madrid", "Zurich", 8),
    ("Marseille", "Essen", 8),
    ("Palermo", "Constantinople", 8),
    ("Palermo", "Moskva", 20),
    ("Paris", "Wien", 8),
    ("Paris", "Zagreb", 7),
    ("Riga", "Bucuresti", 10),
    ("Roma", "Smyrna", 8),
    ("Rostov", "Erzurum", 5),
    ("Sarajevo", "Sevastopol", 8),
    ("Smolensk", "Rostov", 8),
    ("Sofia", "Smyrna", 5),
    ("Stockholm", "Wien", 11),
    ("Venizia", "Constantinople", 10),
    ("Warszawa", "Smolensk", 6),
    ("Zagrab", "Brindisi", 6),
    ("Zurich", "Brindisi", 6),
    ("Zurich", "Budapest", 6),
)

TICKETS: Tuple[Ticket, ...] = tuple(
    Ticket(id=index, city0=_CITIES_BY_NAME[start], city1=_CITIES_BY_NAME[end], value=value)
    for index, (start, end, value) in enumerate(_TICKET_ROUTES)
)


def get_city(name: str) -> City:
    """Look up a city by name.

    Raises:
        KeyError: If the board has no city called ``name``.
    """
    try:
        return _CITIES_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown city: {name}") from None


def get_ticket(ticket_id: int) -> Ticket:
    if not 0 <= ticket_id < len(TICKETS):
        raise KeyError(f"Unknown ticket id: {ticket_id}")
    return TICKETS[ticket_id]


def partition_tickets() -> Tuple[List[Ticket], List[Ticket]]:
    """Split the catalogue into ``(bigs, smalls)``, keeping catalogue order."""
    bigs = [ticket for ticket in TICKETS if ticket.is_big]
    smalls = [ticket for ticket in TICKETS if not ticket.is_big]
    return bigs, smalls


@dataclass
class EuropeMap:
    """Shuffled ticket piles for one game."""

    smalls: List[Ticket] = field(default_factory=list)
    bigs: List[Ticket] = field(default_factory=list)

    @classmethod
    def shuffled(cls, engine: Engine, scheme: UniformScheme = DEFAULT_SCHEME) -> "EuropeMap":
        """Shuffle the big tickets, then the small ones, from ``engine``."""
        bigs, smalls = partition_tickets()
        big_order = repeated_pick_shuffle(engine, [ticket.id for ticket in bigs], scheme)
        small_order = repeated_pick_shuffle(engine, [ticket.id for ticket in smalls], scheme)
        LOGGER.debug("europe.shuffled", bigs=big_order, smalls=small_order[:SMALLS_PER_PLAYER])
        return cls(
            smalls=[TICKETS[ticket_id] for ticket_id in small_order],
            bigs=[TICKETS[ticket_id] for ticket_id in big_order],
        )

    def initial_tickets(self, players: int) -> List[List[Ticket]]:
        """Hand each player the next three small tickets and the next big one."""
        if players > len(self.bigs):
            raise ValueError(f"Only {len(self.bigs)} big tickets remain for {players} players")
        if players * SMALLS_PER_PLAYER > len(self.smalls):
            raise ValueError(f"Only {len(self.smalls)} small tickets remain for {players} players")
        options = []
        for _ in range(players):
            hand = self.smalls[:SMALLS_PER_PLAYER]
            del self.smalls[:SMALLS_PER_PLAYER]
            hand.append(self.bigs.pop(0))
            options.append(hand)
        return options

    def draw_ticket(self) -> Ticket:
        if not self.smalls:
            raise IndexError("The ticket pile is empty")
        return self.smalls.pop(0)
