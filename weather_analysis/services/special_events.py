"""Seasonal and holiday labels for calendar dates."""
from datetime import date
from enum import Enum
from typing import Optional


class SpecialEvent(str, Enum):
    HIGH_SEASON = "high_season"
    IN_SEASON = "in_season"
    NEW_YEAR = "new_year"
    VALENTINES_DAY = "valentines_day"
    LABOUR_DAY = "labour_day"
    VICTORY_DAY = "victory_day"
    ALL_SAINTS = "all_saints"
    ARMISTICE = "armistice"
    CHRISTMAS = "christmas"
    NEW_YEARS_EVE = "new_years_eve"


HIGH_SEASON_MONTHS = {7, 8}
IN_SEASON_MONTHS = {6, 9}

# Fixed-date holidays keyed by "MM-DD". Dates inside the season months
# (e.g. 07-14, 08-15) are masked by the seasonal label and are not listed.
FIXED_HOLIDAYS = {
    "01-01": SpecialEvent.NEW_YEAR,
    "02-14": SpecialEvent.VALENTINES_DAY,
    "05-01": SpecialEvent.LABOUR_DAY,
    "05-08": SpecialEvent.VICTORY_DAY,
    "11-01": SpecialEvent.ALL_SAINTS,
    "11-11": SpecialEvent.ARMISTICE,
    "12-25": SpecialEvent.CHRISTMAS,
    "12-31": SpecialEvent.NEW_YEARS_EVE,
}


def special_event(day: date) -> Optional[SpecialEvent]:
    """
    Label a date with its season or fixed holiday.

    The season (June to September) takes precedence over any holiday.
    """
    if day.month in HIGH_SEASON_MONTHS:
        return SpecialEvent.HIGH_SEASON
    if day.month in IN_SEASON_MONTHS:
        return SpecialEvent.IN_SEASON
    return FIXED_HOLIDAYS.get(day.strftime("%m-%d"))
