"""Single forward scan turning page tokens into per-racer lap records."""

from __future__ import annotations

import logging

from ._classify import is_lap_number_token, is_racer_header_token
from ._errors import TokenParseError
from ._layout import TimingSheetLayout, get_default_layout
from ._lap_builder import build_lap_record
from ._records import LapRecord

logger = logging.getLogger(__name__)


class LapAccumulator:
    """
    Ordered ``racer -> [LapRecord]`` mapping built up during the scan.

    Laps read before any racer header go to the placeholder racer. The
    first header seen afterwards takes them over through
    ``flush_and_retarget``.
    """

    def __init__(self, layout: TimingSheetLayout | None = None) -> None:
        self.layout = layout or get_default_layout()
        self.race_data: dict[str, list[LapRecord]] = {}
        self.current = self.layout.placeholder_racer

    @property
    def placeholder(self) -> str:
        return self.layout.placeholder_racer

    def reset(self) -> None:
        self.current = self.placeholder

    def append(self, lap: LapRecord) -> None:
        self.race_data.setdefault(self.current, []).append(lap)

    def flush_and_retarget(self, racer: str) -> None:
        pending = self.race_data.pop(self.placeholder, [])
        laps = self.race_data.setdefault(racer, [])
        if pending:
            logger.debug(f'Assigning {len(pending)} laps read before the header to {racer}')
            laps.extend(pending)
        self.current = racer

    def result(self) -> dict[str, list[LapRecord]]:
        leftover = self.race_data.get(self.placeholder)
        if leftover:
            logger.warning(f'{len(leftover)} laps were not followed by a racer header; '
                           f'kept under {self.placeholder!r}')
        return {racer: laps for racer, laps in self.race_data.items() if laps}


def scan_page(tokens, accumulator, page=None):
    """Scan one page's tokens into ``accumulator``.

    The cursor and the current racer start fresh; the accumulated laps are
    kept from earlier pages.
    """
    layout = accumulator.layout
    accumulator.reset()

    i = 0
    while i < len(tokens):
        if is_lap_number_token(tokens, i, layout):
            try:
                lap, consumed = build_lap_record(tokens, i, layout)
            except TokenParseError as e:
                e.with_page(page)
                raise
            accumulator.append(lap)
            i += consumed
        elif is_racer_header_token(tokens, i, layout):
            racer = tokens[i + 1]
            logger.debug(f'Racer header {racer!r} at index {i} of page {page}')
            accumulator.flush_and_retarget(racer)
            i += layout.header_span
        else:
            if tokens[i] == layout.end_of_section_label:
                accumulator.reset()
            i += 1

    return accumulator


def assemble_race_data(pages, layout=None):
    """Scan every page in order and return the complete RaceData mapping.

    Raises ``TokenParseError`` on the first malformed row; nothing is
    returned for a partially parsed document.
    """
    accumulator = LapAccumulator(layout)
    for p, tokens in enumerate(pages):
        scan_page(tokens, accumulator, page=p)

    return accumulator.result()
