from parsing.sector_analysis_main import parse_and_save_sector_analysis, setup_logging
from analytics.race_data import SessionData

setup_logging()

# parse info from the sector analysis pdf
parse_and_save_sector_analysis(['silverstone2024.pdf'])

# lap timing and pit stops for the parsed session
session = SessionData('.')
session.add_sessions('silverstone2024')
print(session.timing.head())
print(session.pits.loc[session.pits.InLap == 1])
