"""Lap and sector records produced by the sector analysis scan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SectorRecord:
    sector: int
    time_ms: Optional[int] = None
    speed: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            'sector': self.sector,
            'time_ms': self.time_ms,
            'speed': self.speed,
        }


@dataclass
class LapRecord:
    """
    One lap of one racer.

    Attributes
    ----------
    lap : int
        Lap number as printed on the sheet.

    pit : bool
        True when the row carries the pit marker.

    sectors : list of SectorRecord
        Two sectors for a pit lap, three otherwise, in sector order.

    lap_time_ms : int, optional
        Total lap time column, when the sheet prints one after the sectors.
    """

    lap: int
    pit: bool = False
    sectors: list[SectorRecord] = field(default_factory=list)
    lap_time_ms: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            'lap': self.lap,
            'pit': self.pit,
            'lap_time_ms': self.lap_time_ms,
            'sectors': [s.to_dict() for s in self.sectors],
        }


def race_data_to_dict(race_data: dict[str, list[LapRecord]]) -> dict:
    """Plain ``{racer: [lap, ...]}`` structure ready for ``json.dump``."""
    return {
        racer: [lap.to_dict() for lap in laps]
        for racer, laps in race_data.items()
    }
