"""
The functions of PHP's calendar extension, implemented on top of extcal.

PHP changed some of the results of these functions over the years. Which
behaviour is emulated is chosen by the caller with a `Compat` value, never
guessed: `Compat.modern()` behaves like PHP 8, `Compat.legacy()` like PHP 5.4.

Errors are either raised as `ValueError` (PHP 8) or reported with a warning,
the function then returning `False` (older versions of PHP).
"""

from collections import namedtuple
import time
import warnings

from . import CAL_FRENCH, CAL_GREGORIAN, CAL_JEWISH, CAL_JULIAN, CALENDARS
from .days import DAY_NAMES, DAY_NAMES_SHORT, SECONDS_PER_DAY, UNIX_EPOCH_JD, day_of_week
from .exceptions import CalendarError, DateOutOfRange
from .jewish import JewishCalendar, jewish_calendar


CAL_NUM_CALS = 4

CAL_DOW_DAYNO = 0
CAL_DOW_LONG = 1
CAL_DOW_SHORT = 2

CAL_MONTH_GREGORIAN_SHORT = 0
CAL_MONTH_GREGORIAN_LONG = 1
CAL_MONTH_JULIAN_SHORT = 2
CAL_MONTH_JULIAN_LONG = 3
CAL_MONTH_JEWISH = 4
CAL_MONTH_FRENCH = 5

CAL_EASTER_DEFAULT = 0
CAL_EASTER_ROMAN = 1
CAL_EASTER_ALWAYS_GREGORIAN = 2
CAL_EASTER_ALWAYS_JULIAN = 3

CAL_JEWISH_ADD_ALAFIM_GERESH = 2
CAL_JEWISH_ADD_ALAFIM = 4
CAL_JEWISH_ADD_GERESHAYIM = 8

# The Julian days that PHP (64 bits) converts to each calendar
JD_LIMITS = {
    CAL_GREGORIAN: (1, 2305843009213661906),
    CAL_JULIAN: (1, 784368370349),
    CAL_JEWISH: (JewishCalendar.jd_start, JewishCalendar.jd_end),
    CAL_FRENCH: (2375840, 2380952),
}

jewish_calendar_54254 = JewishCalendar(emulate_bug_54254=True)


class Compat(namedtuple('Compat', (
    'emulate_bug_54254', 'emulate_bug_67960', 'emulate_bug_67976',
    'raise_errors', 'jdtounix_upper_limit',
))):
    """Which version of PHP's behaviour to reproduce.

    - bug #54254 (fixed in 5.5.0): Adar of a common year is month 6, named
      "AdarI", instead of month 7, named "Adar";
    - bug #67960 (fixed in 5.5.21 and 5.6.5): the values of CAL_DOW_SHORT and
      CAL_DOW_LONG are swapped;
    - bug #67976 (fixed in 5.6.25 and 7.0.10): the 13th month of year 14 of
      the French calendar has -2380948 days;
    - `raise_errors`: PHP 8 raises ValueError where older versions emit a
      warning and return false;
    - `jdtounix_upper_limit`: 2465343 (year 2037) before PHP 7.3.24.
    """

    __slots__ = ()

    @classmethod
    def modern(cls):
        return cls(False, False, False, True, 106751993607888)

    @classmethod
    def legacy(cls):
        return cls(True, True, True, False, 2465343)

    @property
    def cal_dow_long(self):
        return CAL_DOW_SHORT if self.emulate_bug_67960 else CAL_DOW_LONG

    @property
    def cal_dow_short(self):
        return CAL_DOW_LONG if self.emulate_bug_67960 else CAL_DOW_SHORT

    @property
    def jewish_calendar(self):
        return jewish_calendar_54254 if self.emulate_bug_54254 else jewish_calendar


MODERN = Compat.modern()
LEGACY = Compat.legacy()


def _error(compat, message, warning=None):
    if compat.raise_errors:
        raise ValueError(message)
    warnings.warn(warning or message, stacklevel=3)
    return False


def _invalid_calendar(compat, function, argument, calendar_id):
    return _error(
        compat,
        '%s(): Argument #%i ($calendar) must be a valid calendar ID' % (function, argument),
        'invalid calendar ID %r' % (calendar_id,),
    )


def _calendar(calendar_id, compat):
    if calendar_id == CAL_JEWISH:
        return compat.jewish_calendar
    return CALENDARS[calendar_id]


def _jd_to_ymd(calendar_id, jd, compat):
    """Julian days outside of PHP's limits are returned as (0, 0, 0)."""
    jd_min, jd_max = JD_LIMITS[calendar_id]
    if jd_min <= jd <= jd_max:
        return _calendar(calendar_id, compat).jd_to_ymd(jd)
    return 0, 0, 0


def _mdy(ymd):
    year, month, day = ymd
    return '%i/%i/%i' % (month, day, year)


def _month_names(calendar_id, year, compat, abbreviated=False):
    """Returns the month names as PHP indexes them, from 1."""
    calendar = _calendar(calendar_id, compat)
    if calendar_id == CAL_JEWISH and year == 0:
        names = calendar.month_names_of_year(1)
    else:
        names = calendar.month_names_of_year(year, abbreviated)
    return ('',) + names


def _ymd_to_jd(calendar, year, month, day):
    """Converts a date the way PHP does: only the range of each field is
    checked, so 30 February 2000 is 1 March 2000. Invalid dates are 0.
    """
    if not 1 <= month <= calendar.max_months_in_year or \
       not 1 <= day <= calendar.max_days_in_month:
        return 0
    try:
        calendar.check_year(year)
    except CalendarError:
        return 0
    jd = calendar._ymd_to_jd(year, month, day)
    return jd if jd > 0 else 0


def cal_days_in_month(calendar_id, month, year, compat=MODERN):
    if calendar_id not in CALENDARS:
        return _invalid_calendar(compat, 'cal_days_in_month', 1, calendar_id)
    if calendar_id == CAL_FRENCH and month == 13 and year == 14 and compat.emulate_bug_67976:
        return -2380948
    if calendar_id == CAL_JEWISH:
        month = _jewish_month(year, month, compat)
    try:
        return _calendar(calendar_id, compat).days_in_month(year, month)
    except CalendarError:
        return _error(compat, 'Invalid date', 'invalid date')


def cal_from_jd(jd, calendar_id, compat=MODERN):
    if calendar_id not in CALENDARS:
        return _invalid_calendar(compat, 'cal_from_jd', 2, calendar_id)
    year, month, day = ymd = _jd_to_ymd(calendar_id, jd, compat)
    months = _month_names(calendar_id, year, compat)
    months_short = _month_names(calendar_id, year, compat, abbreviated=True)
    r = {
        'date': _mdy(ymd),
        'month': month,
        'day': day,
        'year': year,
        'dow': day_of_week(jd),
        'abbrevdayname': DAY_NAMES_SHORT[day_of_week(jd)],
        'dayname': DAY_NAMES[day_of_week(jd)],
        'abbrevmonth': months_short[month],
        'monthname': months[month],
    }
    if calendar_id == CAL_JEWISH and year == 0 and not compat.emulate_bug_67976:
        r.update(dow=None, dayname='', abbrevdayname='')
    return r


def cal_info(calendar_id=-1, compat=MODERN):
    if calendar_id == -1:
        return {i: cal_info(i, compat) for i in (CAL_GREGORIAN, CAL_JULIAN, CAL_JEWISH, CAL_FRENCH)}
    if calendar_id not in CALENDARS:
        return _invalid_calendar(compat, 'cal_info', 1, calendar_id)
    calendar = _calendar(calendar_id, compat)
    months = calendar.month_names
    months_short = calendar.month_names_short or months
    return {
        'months': dict(enumerate(months, 1)),
        'abbrevmonths': dict(enumerate(months_short, 1)),
        'maxdaysinmonth': calendar.max_days_in_month,
        'calname': calendar.name,
        'calsymbol': calendar.symbol,
    }


def cal_to_jd(calendar_id, month, day, year, compat=MODERN):
    if calendar_id == CAL_FRENCH:
        return frenchtojd(month, day, year)
    if calendar_id == CAL_GREGORIAN:
        return gregoriantojd(month, day, year)
    if calendar_id == CAL_JEWISH:
        return jewishtojd(month, day, year, compat)
    if calendar_id == CAL_JULIAN:
        return juliantojd(month, day, year)
    return _invalid_calendar(compat, 'cal_to_jd', 1, calendar_id)


def easter_days(year=None, method=CAL_EASTER_DEFAULT):
    """Returns the number of days after March 21 on which Easter falls.

    By default the Julian calendar is used up to 1752, the year Great Britain
    switched to the Gregorian calendar. `CAL_EASTER_ROMAN` switches in 1582.
    """
    if year is None:
        year = time.localtime().tm_year
    if method == CAL_EASTER_ALWAYS_JULIAN or \
       method == CAL_EASTER_ROMAN and year <= 1582 or \
       year <= 1752 and method not in (CAL_EASTER_ROMAN, CAL_EASTER_ALWAYS_GREGORIAN):
        return CALENDARS[CAL_JULIAN].easter_days(year)
    return CALENDARS[CAL_GREGORIAN].easter_days(year)


def easter_date(year=None, compat=MODERN):
    """Returns the Unix timestamp of midnight (local time) on Easter Sunday."""
    if year is None:
        year = time.localtime().tm_year
    if not 1970 <= year <= 2037:
        return _error(
            compat,
            'easter_date(): Argument #1 ($year) must be between 1970 and 2037 (inclusive)',
            'This function is only valid for years between 1970 and 2037 inclusive',
        )
    days = CALENDARS[CAL_GREGORIAN].easter_days(year)
    if days < 11:
        month, day = 3, days + 21
    else:
        month, day = 4, days - 10
    return int(time.mktime((year, month, day, 0, 0, 0, 0, 0, -1)))


def frenchtojd(month, day, year):
    if year <= 0:
        return 0
    return _ymd_to_jd(CALENDARS[CAL_FRENCH], year, month, day)


def gregoriantojd(month, day, year):
    if year == 0:
        return 0
    return _ymd_to_jd(CALENDARS[CAL_GREGORIAN], year, month, day)


def juliantojd(month, day, year):
    if year == 0:
        return 0
    return _ymd_to_jd(CALENDARS[CAL_JULIAN], year, month, day)


def _jewish_month(year, month, compat):
    # Adar of a common year is accepted as either month 6 or month 7
    if month in (6, 7) and year > 0 and not jewish_calendar.is_leap_year(year):
        return 6 if compat.emulate_bug_54254 else 7
    return month


def jewishtojd(month, day, year, compat=MODERN):
    if year <= 0:
        return 0
    month = _jewish_month(year, month, compat)
    return _ymd_to_jd(compat.jewish_calendar, year, month, day)


def jddayofweek(jd, mode=CAL_DOW_DAYNO):
    # Modes 1 and 2, whatever the constants say (see bug #67960)
    if mode == 1:
        return DAY_NAMES[day_of_week(jd)]
    if mode == 2:
        return DAY_NAMES_SHORT[day_of_week(jd)]
    return day_of_week(jd)


def jdmonthname(jd, mode, compat=MODERN):
    if mode == CAL_MONTH_GREGORIAN_LONG:
        calendar_id, abbreviated = CAL_GREGORIAN, False
    elif mode == CAL_MONTH_JULIAN_LONG:
        calendar_id, abbreviated = CAL_JULIAN, False
    elif mode == CAL_MONTH_JULIAN_SHORT:
        calendar_id, abbreviated = CAL_JULIAN, True
    elif mode == CAL_MONTH_JEWISH:
        calendar_id, abbreviated = CAL_JEWISH, False
    elif mode == CAL_MONTH_FRENCH:
        calendar_id, abbreviated = CAL_FRENCH, False
    else:
        calendar_id, abbreviated = CAL_GREGORIAN, True
    year, month, day = _jd_to_ymd(calendar_id, jd, compat)
    return _month_names(calendar_id, year, compat, abbreviated)[month]


def jdtofrench(jd, compat=MODERN):
    # Years 1 to 14 are converted, even though the calendar officially ended
    # on 10 Nivôse 14 (JD 2380687, 31 December 1805).
    return _mdy(_jd_to_ymd(CAL_FRENCH, jd, compat))


def jdtogregorian(jd, compat=MODERN):
    return _mdy(_jd_to_ymd(CAL_GREGORIAN, jd, compat))


def jdtojulian(jd, compat=MODERN):
    return _mdy(_jd_to_ymd(CAL_JULIAN, jd, compat))


def jdtojewish(jd, hebrew=False, fl=0, compat=MODERN):
    if not hebrew:
        return _mdy(_jd_to_ymd(CAL_JEWISH, jd, compat))
    try:
        return compat.jewish_calendar.jd_to_hebrew(
            jd,
            alafim_garesh=bool(fl & CAL_JEWISH_ADD_ALAFIM_GERESH),
            alafim=bool(fl & CAL_JEWISH_ADD_ALAFIM),
            gereshayim=bool(fl & CAL_JEWISH_ADD_GERESHAYIM),
        )
    except DateOutOfRange as e:
        return _error(compat, str(e))


def jdtounix(jd, compat=MODERN):
    if UNIX_EPOCH_JD <= jd <= compat.jdtounix_upper_limit:
        return (jd - UNIX_EPOCH_JD) * SECONDS_PER_DAY
    if compat.raise_errors:
        raise ValueError('jday must be between %i and %i' % (UNIX_EPOCH_JD, compat.jdtounix_upper_limit))
    return False


def unixtojd(timestamp=None, compat=MODERN):
    """Returns the Julian day of a Unix timestamp, in UTC."""
    if timestamp is None:
        timestamp = int(time.time())
    if timestamp < 0:
        if compat.raise_errors:
            raise ValueError('unixtojd(): Argument #1 ($timestamp) must be greater than or equal to 0')
        return False
    return UNIX_EPOCH_JD + timestamp // SECONDS_PER_DAY
