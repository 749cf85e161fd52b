"""
Conversions between the Gregorian, Julian, French Republican and Jewish
calendars, through Julian day numbers.
"""

from .exceptions import CalendarError, DateOutOfRange, InvalidCalendarField
from .fr_calendar import FrenchCalendar, french_calendar
from .gregorian import GregorianCalendar, JulianCalendar, gregorian_calendar, julian_calendar
from .jewish import JewishCalendar, jewish_calendar


__version__ = '1.0.0'

CAL_GREGORIAN = 0
CAL_JULIAN = 1
CAL_JEWISH = 2
CAL_FRENCH = 3

CALENDARS = {
    CAL_GREGORIAN: gregorian_calendar,
    CAL_JULIAN: julian_calendar,
    CAL_JEWISH: jewish_calendar,
    CAL_FRENCH: french_calendar,
}
CALENDARS_BY_NAME = {c.name.lower(): c for c in CALENDARS.values()}


def get_calendar(key):
    """Returns a calendar from its number (`CAL_JEWISH`) or name ("jewish").
    """
    try:
        if isinstance(key, str):
            return CALENDARS_BY_NAME[key.lower()]
        return CALENDARS[key]
    except KeyError:
        raise ValueError('unknown calendar %r' % (key,))


def convert(from_calendar, to_calendar, year, month, day):
    jd = get_calendar(from_calendar).ymd_to_jd(year, month, day)
    return get_calendar(to_calendar).jd_to_ymd(jd)
