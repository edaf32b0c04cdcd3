"""High-level container over the cleaned sector analysis tables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from ._lap_timing import build_lap_timing
from ._pit_stops import build_pit_stops


@dataclass
class SessionData:
    """
    Container for the derived data of one or more parsed sessions.

    Parameters
    ----------
    base_dir : str or pathlib.Path, optional
        Project root directory. If not provided, defaults to the parent
        of the ``analytics`` package (i.e. ``..`` relative to this file).

    Attributes
    ----------
    session_options : pandas.DataFrame
        One row per parquet file found in ``cleandata/sector analysis``.

    sessions : pandas.DataFrame
        The subset of ``session_options`` loaded so far.

    sectors_df : pandas.DataFrame
        Sector rows of the loaded sessions, tagged with ``Session``.

    timing_df : pandas.DataFrame
        Per-lap timing table, built on demand.

    pit_stops : pandas.DataFrame
        Pit stop metadata per lap, built on demand.
    """

    base_dir: Path
    session_options: pd.DataFrame
    sessions: pd.DataFrame
    sectors_df: Optional[pd.DataFrame]
    timing_df: Optional[pd.DataFrame]
    pit_stops: Optional[pd.DataFrame]

    def __init__(
        self,
        base_dir: Optional[str | Path] = None,
    ) -> None:

        # determine project root directory
        if base_dir is None:
            # analytics/ -> project root
            base_dir = Path(__file__).resolve().parents[1]
        else:
            base_dir = Path(base_dir).resolve()

        self.base_dir = base_dir
        self.session_options = self._get_session_table_from_dir(
            self.base_dir / "cleandata" / "sector analysis"
        )
        self.sessions = pd.DataFrame({}, columns=self.session_options.columns)
        self.sectors_df = None
        self.timing_df = None
        self.pit_stops = None

    def add_sessions(self, names):

        # determine list of names to use based on input
        if type(names) == list:
            name_lst = list(map(str, names))
        else:
            name_lst = [str(names)]

        new_sessions = self.session_options.loc[
            self.session_options.Session.isin(name_lst) &
            ~self.session_options.Session.isin(self.sessions.Session)
        ]
        missing = set(name_lst) - set(self.session_options.Session)
        if missing:
            raise KeyError(f"No parsed sector analysis for: {', '.join(sorted(missing))}")

        new_dfs = []
        for i in new_sessions.index:
            df = pd.read_parquet(self.base_dir / "cleandata" / "sector analysis" / new_sessions.loc[i, "File"])
            df["Session"] = new_sessions.loc[i, "Session"]
            new_dfs.append(df)

        self.sessions = pd.concat([self.sessions, new_sessions], ignore_index=True)
        if new_dfs:
            self.sectors_df = pd.concat(
                ([self.sectors_df] if self.sectors_df is not None else []) + new_dfs,
                ignore_index=True,
            )

        # derived tables are stale now
        self.timing_df = None
        self.pit_stops = None

    @property
    def timing(self) -> pd.DataFrame:
        if self.timing_df is None:
            self.timing_df = self._build_lap_timing_df()
        return self.timing_df

    @property
    def pits(self) -> pd.DataFrame:
        if self.pit_stops is None:
            self.pit_stops = self._build_pit_stops()
        return self.pit_stops

    def _build_lap_timing_df(self) -> pd.DataFrame:
        if self.sectors_df is None:
            raise ValueError("No sessions loaded; call add_sessions first")

        dfs = []
        for session, df in self.sectors_df.groupby("Session", sort=False):
            timing = build_lap_timing(df)
            timing.insert(0, "Session", session)
            dfs.append(timing)

        return pd.concat(dfs, ignore_index=True)

    def _build_pit_stops(self) -> pd.DataFrame:
        dfs = []
        for session, df in self.timing.groupby("Session", sort=False):
            dfs.append(build_pit_stops(df))

        return pd.concat(dfs, ignore_index=True)

    @staticmethod
    def _get_session_table_from_dir(directory: Path) -> pd.DataFrame:
        if not directory.exists():
            raise FileNotFoundError(f"Directory not found: {directory}")

        return pd.DataFrame(
            [
                {"Session": f[:-len(".pq")], "File": f}
                for f in sorted(os.listdir(directory))
                if f.endswith(".pq")
            ],
            columns=["Session", "File"],
        )
