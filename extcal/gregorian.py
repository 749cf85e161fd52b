"""
The proleptic Julian and Gregorian calendars.

Years are numbered historically: there is no year 0, the year before 1 is -1
(1 BCE). Internally the formulas work on astronomical years, where 1 BCE is 0.
"""

from .calendar import Calendar
from .exceptions import InvalidCalendarField


MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)
MONTH_NAMES_SHORT = tuple(m[:3] for m in MONTH_NAMES)

MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_LENGTHS_LEAP = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def astronomical_year(year):
    return year + 1 if year < 0 else year


class JulianCalendar(Calendar):

    name = 'Julian'
    symbol = 'CAL_JULIAN'
    number = 1
    gedcom_escape = '@#DJULIAN@'

    # Julian day epoch in the day count starting on 1 March 4801 BCE
    _jd_offset = 32083

    max_months_in_year = 12
    max_days_in_month = 31

    month_names = MONTH_NAMES
    month_names_short = MONTH_NAMES_SHORT

    def is_leap_year(self, year):
        return astronomical_year(year) % 4 == 0

    def check_year(self, year):
        if year == 0:
            raise InvalidCalendarField('there is no year 0 in the %s calendar' % self.name)

    def month_lengths(self, year):
        return MONTH_LENGTHS_LEAP if self.is_leap_year(year) else MONTH_LENGTHS

    def _ymd_to_jd(self, year, month, day):
        # Count from March of a year before any date of interest, so that
        # the leap day ends the year.
        a = (14 - month) // 12
        y = astronomical_year(year) + 4800 - a
        m = month + 12 * a - 3
        return day + (153 * m + 2) // 5 + 365 * y + self._leap_days(y) - self._jd_offset

    def _leap_days(self, y):
        return y // 4

    def _jd_to_ymd(self, jd):
        c = jd + 32082
        return self._civil_from_days(0, c)

    @staticmethod
    def _civil_from_days(centuries, c):
        d = (4 * c + 3) // 1461
        e = c - 1461 * d // 4
        m = (5 * e + 2) // 153
        day = e - (153 * m + 2) // 5 + 1
        month = m + 3 - 12 * (m // 10)
        year = 100 * centuries + d - 4800 + m // 10
        if year < 1:
            year -= 1
        return year, month, day

    def easter_days(self, year):
        """Returns the number of days after March 21 on which Easter falls.
        """
        golden = year % 19 + 1
        # The dominical number, to find a Sunday
        dom = (year + year // 4 + 5) % 7
        # The Paschal full moon
        pfm = (3 - 11 * golden - 7) % 30
        return self._easter(golden, dom, pfm)

    @staticmethod
    def _easter(golden, dom, pfm):
        if pfm == 29 or pfm == 28 and golden > 11:
            pfm -= 1
        return pfm + (4 - pfm - dom) % 7 + 1


class GregorianCalendar(JulianCalendar):

    name = 'Gregorian'
    symbol = 'CAL_GREGORIAN'
    number = 0
    gedcom_escape = '@#DGREGORIAN@'

    _jd_offset = 32045

    def is_leap_year(self, year):
        year = astronomical_year(year)
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def _leap_days(self, y):
        return y // 4 - y // 100 + y // 400

    def _jd_to_ymd(self, jd):
        a = jd + 32044
        b = (4 * a + 3) // 146097
        c = a - 146097 * b // 4
        return self._civil_from_days(b, c)

    def easter_days(self, year):
        golden = year % 19 + 1
        dom = (year + year // 4 - year // 100 + year // 400) % 7
        # The solar and lunar corrections
        solar = (year - 1600) // 100 - (year - 1600) // 400
        lunar = (year - 1400) // 100 * 8 // 25
        pfm = (3 - 11 * golden + solar - lunar) % 30
        return self._easter(golden, dom, pfm)


julian_calendar = JulianCalendar()
gregorian_calendar = GregorianCalendar()
