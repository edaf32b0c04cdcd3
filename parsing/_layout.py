from dataclasses import dataclass


@dataclass(frozen=True)
class TimingSheetLayout:
    """Fixed labels and spans of the sector analysis sheet.

    ``header_span`` is the number of tokens a racer header block occupies
    (racer number and name). It comes from the sheet's layout and is not
    inferred from the token stream.
    """

    pit_marker: str = 'P'
    time_label: str = 'TIME'
    sector_label: str = 'SECTOR'
    placeholder_racer: str = 'unknown'
    header_span: int = 2
    end_of_section_label: str = 'Race Sector Analysis'


def get_default_layout():
    return TimingSheetLayout()
