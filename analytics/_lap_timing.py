"""Lap timing analytics utilities."""

import pandas as pd

SECTOR_COLUMNS = ["Racer", "Lap", "Pit", "Sector", "Time", "Speed", "LapTime"]


def build_sector_table(race_data):
    """Flatten ``{racer: [LapRecord, ...]}`` into one row per sector.

    ``Time`` and ``LapTime`` are in seconds; missing values are NaN.
    """

    rows = []
    for racer, laps in race_data.items():
        for lap in laps:
            for sector in lap.sectors:
                rows.append({
                    "Racer": racer,
                    "Lap": lap.lap,
                    "Pit": lap.pit,
                    "Sector": sector.sector,
                    "Time": None if sector.time_ms is None else sector.time_ms / 1000,
                    "Speed": sector.speed,
                    "LapTime": None if lap.lap_time_ms is None else lap.lap_time_ms / 1000,
                })

    df = pd.DataFrame(rows, columns=SECTOR_COLUMNS)
    df["Lap"] = df["Lap"].astype(int)
    df["Sector"] = df["Sector"].astype(int)
    df["Pit"] = df["Pit"].astype(bool)
    df[["Time", "Speed", "LapTime"]] = df[["Time", "Speed", "LapTime"]].astype(float)
    return df


def build_lap_timing(sector_df):

    sectors = sector_df.copy()
    sectors["Racer"] = sectors["Racer"].astype(str)

    laps = (
        sectors
        .groupby(["Racer", "Lap"], as_index=False, sort=False)
        .agg(
            Pit=("Pit", "max"),
            SectorTime=("Time", "sum"),
            SectorCount=("Sector", "count"),
            TimedSectors=("Time", "count"),
            PrintedLapTime=("LapTime", "first"),
        )
    )

    # the printed total wins; otherwise only a fully timed three-sector lap
    # can be summed
    complete = (laps["SectorCount"] == 3) & (laps["TimedSectors"] == 3)
    laps["LapTime"] = laps["PrintedLapTime"].where(
        laps["PrintedLapTime"].notna(),
        laps["SectorTime"].where(complete),
    )

    laps = laps.sort_values(["Racer", "Lap"], kind="stable").reset_index(drop=True)
    # race time is unknown from the first lap without a lap time
    laps["RaceTime"] = laps.groupby("Racer")["LapTime"].transform(
        lambda s: s.cumsum(skipna=False)
    )

    ordered_columns = [
        "Racer",
        "Lap",
        "LapTime",
        "RaceTime",
        "Pit",
     ]

    return laps[ordered_columns]
