"""Parsing of race sector analysis timing sheets."""

from ._assembler import LapAccumulator, assemble_race_data
from ._errors import DocumentOpenError, PageExtractionError, SectorAnalysisError, TokenParseError
from ._layout import TimingSheetLayout
from ._records import LapRecord, SectorRecord, race_data_to_dict

__all__ = [
    "LapAccumulator",
    "assemble_race_data",
    "DocumentOpenError",
    "PageExtractionError",
    "SectorAnalysisError",
    "TokenParseError",
    "TimingSheetLayout",
    "LapRecord",
    "SectorRecord",
    "race_data_to_dict",
]
