"""Pit stop analytics utilities."""

import pandas as pd


def build_pit_stops(lap_timing_df: pd.DataFrame) -> pd.DataFrame:
    """Build per-lap pit stop metadata.

    Parameters
    ----------
    lap_timing_df : pandas.DataFrame
        Output of ``build_lap_timing``. Must include columns
        ``Racer``, ``Lap`` and ``Pit``.

    Returns
    -------
    pandas.DataFrame
        A copy of ``lap_timing_df`` with the following additional columns:

        - ``InLap``: 1 if the lap carries the pit marker, else 0.
        - ``OutLap``: 1 if the previous lap of the racer was a pit lap, else 0.
        - ``LastPitLap``: the most recent pit lap of the racer, 0 before the first stop.
        - ``LapsSincePit``: laps completed since ``LastPitLap``.
    """

    # Ensure we do not mutate caller dataframes
    ps = lap_timing_df.copy()
    ps["Racer"] = ps["Racer"].astype(str)
    ps = ps.sort_values(["Racer", "Lap"], kind="stable").reset_index(drop=True)

    ps["InLap"] = ps["Pit"].astype(int)
    ps["OutLap"] = (
        ps.groupby("Racer")["InLap"].shift(1).fillna(0).astype(int)
    )

    # Define last pit lap and laps since pit
    ps["LastPitLap"] = ps["Lap"].where(ps["InLap"] == 1)
    ps["LastPitLap"] = ps.groupby("Racer")["LastPitLap"].ffill().fillna(0).astype(int)

    ps["LapsSincePit"] = (ps["Lap"] - ps["LastPitLap"]).astype(int)

    return ps
