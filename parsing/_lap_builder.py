"""Build a LapRecord from the tokens following a lap number.

The three row shapes of the sheet are described by ``LAP_GRAMMAR``. Offsets
are relative to the lap number token. Rows are tried in table order and the
first whose selector matches is used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ._classify import is_lap_number_token
from ._errors import TokenParseError
from ._layout import TimingSheetLayout, get_default_layout
from ._records import LapRecord, SectorRecord
from ._timing import is_duration, parse_speed, parse_time_ms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectorSlot:
    sector: int
    time_offset: Optional[int]
    speed_offset: Optional[int]


@dataclass(frozen=True)
class LapVariant:
    name: str
    selector: Callable[[list, int, TimingSheetLayout], bool]
    sectors: tuple
    consumed: int
    pit: bool = False


def _pairs(first_sector, first_offset, count):
    # consecutive (time, speed) pairs, two tokens per sector
    return tuple(
        SectorSlot(first_sector + n, first_offset + 2 * n, first_offset + 2 * n + 1)
        for n in range(count)
    )


def _token_at(tokens, index):
    return tokens[index] if 0 <= index < len(tokens) else None


def _is_pit_row(tokens, index, layout):
    return _token_at(tokens, index + 1) == layout.pit_marker


def _is_start_row(tokens, index, layout):
    # the start lap has no sector 1 time, so the next lap number comes one
    # token earlier than after a normal row
    return is_lap_number_token(tokens, index + 8, layout)


def _is_normal_row(tokens, index, layout):
    return True


LAP_GRAMMAR = (
    LapVariant(
        name='pit',
        selector=_is_pit_row,
        # sector 3 speed column holds pit information
        sectors=_pairs(2, 2, 1) + (SectorSlot(3, 6, None),),
        consumed=7,
        pit=True,
    ),
    LapVariant(
        name='start',
        selector=_is_start_row,
        # grid speed only for sector 1
        sectors=(SectorSlot(1, None, 2),) + _pairs(2, 3, 2),
        consumed=7,
    ),
    LapVariant(
        name='normal',
        selector=_is_normal_row,
        sectors=_pairs(1, 2, 3),
        consumed=8,
    ),
)


def select_lap_variant(tokens, index, layout=None):
    layout = layout or get_default_layout()
    # the last row of the table is the default and always matches
    for variant in LAP_GRAMMAR:
        if variant.selector(tokens, index, layout):
            return variant


def _read(tokens, index, parse, step):
    value = _token_at(tokens, index)
    if value is None:
        raise TokenParseError('<end of page>', index, step)
    return parse(value, index, step)


def build_lap_record(tokens, index, layout=None):
    """Decode the lap row starting at ``index``.

    Returns
    -------
    (LapRecord, int)
        The record and the number of tokens the row occupies, so the caller
        can move its cursor past it.
    """
    layout = layout or get_default_layout()
    variant = select_lap_variant(tokens, index, layout)
    logger.debug(f'Lap {tokens[index]} at index {index} read as {variant.name} row')

    lap = LapRecord(lap=int(tokens[index]), pit=variant.pit)
    for slot in variant.sectors:
        sector = SectorRecord(sector=slot.sector)
        if slot.time_offset is not None:
            sector.time_ms = _read(tokens, index + slot.time_offset,
                                   parse_time_ms, f'sector {slot.sector} time')
        if slot.speed_offset is not None:
            sector.speed = _read(tokens, index + slot.speed_offset,
                                 parse_speed, f'sector {slot.sector} speed')
        lap.sectors.append(sector)

    # total lap time column follows the row when the sheet prints it;
    # anything else there is left to the scan as noise
    total = _token_at(tokens, index + variant.consumed)
    if total is not None and is_duration(total):
        lap.lap_time_ms = parse_time_ms(total, index + variant.consumed, 'lap time')

    return lap, variant.consumed
