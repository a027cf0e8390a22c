"""Pydantic contracts for the JSON form of each draw report."""

from typing import List

import orjson
from pydantic import BaseModel, Field

from .drivers import SweepRow, TicketDraw
from .engine import GameSetup
from .europe import Ticket
from .sampler import UniformScheme
from .trains import Train


class SweepRowModel(BaseModel):
    """One discard-sweep row."""
    index: int = Field(..., ge=0)
    values: List[int]
    draws: int = Field(..., ge=0, description="Engine outputs consumed by the picks, rejections included")


class SweepReport(BaseModel):
    """Full discard sweep for one seed."""
    seed: int = Field(..., ge=0)
    scheme: UniformScheme
    rows: List[SweepRowModel]


class TicketReport(BaseModel):
    """Ticket shuffles and train picks for one seed."""
    seed: int = Field(..., ge=0)
    scheme: UniformScheme
    tickets: List[int] = Field(..., description="Small-ticket pool after shuffling")
    bigs: List[int] = Field(..., description="Big-ticket pool after shuffling")
    trains: List[List[int]]
    draws: int = Field(..., ge=0)


class CardModel(BaseModel):
    id: int
    colour: str


class TicketModel(BaseModel):
    id: int
    start: str
    end: str
    value: int


class PlayerModel(BaseModel):
    id: int
    hand: List[CardModel]
    ticket_options: List[TicketModel]
    trains: int


class SetupReport(BaseModel):
    """Opening deal for one seed."""
    seed: int = Field(..., ge=0)
    scheme: UniformScheme
    face_up: List[CardModel]
    redeals: int
    players: List[PlayerModel]
    deck_remaining: int
    discarded: List[CardModel]


def _card(card: Train) -> CardModel:
    return CardModel(id=card.id, colour=card.colour.value)


def _ticket(ticket: Ticket) -> TicketModel:
    return TicketModel(id=ticket.id, start=ticket.city0.name, end=ticket.city1.name, value=ticket.value)


def sweep_report(seed: int, scheme: UniformScheme, rows: List[SweepRow]) -> SweepReport:
    return SweepReport(
        seed=seed,
        scheme=scheme,
        rows=[SweepRowModel(index=row.index, values=row.values, draws=row.draws) for row in rows],
    )


def ticket_report(draw: TicketDraw) -> TicketReport:
    return TicketReport(
        seed=draw.seed,
        scheme=draw.scheme,
        tickets=draw.tickets,
        bigs=draw.bigs,
        trains=draw.trains,
        draws=draw.draws,
    )


def setup_report(setup: GameSetup) -> SetupReport:
    return SetupReport(
        seed=setup.seed,
        scheme=setup.scheme,
        face_up=[_card(card) for card in setup.face_up.cards],
        redeals=setup.face_up.redeals,
        players=[
            PlayerModel(
                id=player.id,
                hand=[_card(card) for card in player.hand],
                ticket_options=[_ticket(ticket) for ticket in player.ticket_options],
                trains=player.trains,
            )
            for player in setup.players
        ],
        deck_remaining=len(setup.deck),
        discarded=[_card(card) for card in setup.deck.discards],
    )


def dump_report(report: BaseModel) -> str:
    """Serialize a report as indented JSON text."""
    return orjson.dumps(report.model_dump(mode="json"), option=orjson.OPT_INDENT_2).decode("utf-8")
