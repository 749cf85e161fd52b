"""
The Jewish (Hebrew) calendar.

A lunisolar calendar: months follow the mean lunar conjunction (the molad)
and a 13th month is added 7 times in every 19 years to stay in step with the
sun. The first day of a year is the day of the molad of Tishri, postponed by
the dehiyot rules, so the length of a year is only known once the start of
the next one has been computed.

Months are numbered the same way every year, from Tishri (1) to Elul (13).
Month 6 (Adar I) only exists in leap years, month 7 is Adar in common years
and Adar II in leap years.
"""

from functools import lru_cache

from .calendar import Calendar
from .exceptions import DateOutOfRange, InvalidCalendarField
from .hebrew import format_hebrew_number


HALAKIM_PER_HOUR = 1080
HALAKIM_PER_DAY = 24 * HALAKIM_PER_HOUR
# A mean lunar month lasts 29 days, 12 hours and 793 parts
HALAKIM_PER_MONTH = 29 * HALAKIM_PER_DAY + 12 * HALAKIM_PER_HOUR + 793

# The molad of Tishri of year 1 ("BaHaRaD"): Monday, 5 hours and 204 parts.
# Days are counted from the Sunday before, hours from 6pm the day before.
MOLAD_BAHARAD = 1 * HALAKIM_PER_DAY + 5 * HALAKIM_PER_HOUR + 204

# Julian day of the Sunday from which the molad days are counted
JD_OFFSET = 347997

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

# Thresholds of the dehiyot
MOLAD_ZAKEN = 18 * HALAKIM_PER_HOUR
GATARAD = 9 * HALAKIM_PER_HOUR + 204
BETUTAKPAT = 15 * HALAKIM_PER_HOUR + 589

LEAP_YEARS_IN_CYCLE = frozenset((0, 3, 6, 8, 11, 14, 17))

DEFICIENT, REGULAR, ABUNDANT = 'deficient', 'regular', 'abundant'
YEAR_TYPES = {
    353: DEFICIENT, 354: REGULAR, 355: ABUNDANT,
    383: DEFICIENT, 384: REGULAR, 385: ABUNDANT,
}

# Heshvan and Kislev depend on the year type, Adar I on the year being leap
MONTH_LENGTHS = {
    353: (30, 29, 29, 29, 30, 0, 29, 30, 29, 30, 29, 30, 29),
    354: (30, 29, 30, 29, 30, 0, 29, 30, 29, 30, 29, 30, 29),
    355: (30, 30, 30, 29, 30, 0, 29, 30, 29, 30, 29, 30, 29),
    383: (30, 29, 29, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29),
    384: (30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29),
    385: (30, 30, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29),
}

MONTH_NAMES = (
    'Tishri', 'Heshvan', 'Kislev', 'Tevet', 'Shevat', 'Adar',
    'Adar', 'Nisan', 'Iyyar', 'Sivan', 'Tammuz', 'Av', 'Elul',
)
MONTH_NAMES_LEAP = MONTH_NAMES[:5] + ('Adar I', 'Adar II') + MONTH_NAMES[7:]
# The names returned by PHP before version 5.5 (bug #54254)
MONTH_NAMES_54254 = MONTH_NAMES[:5] + ('AdarI', 'AdarII') + MONTH_NAMES[7:]

HEBREW_MONTH_NAMES = (
    'תשרי', 'חשון', 'כסלו', 'טבת', 'שבט', 'אדר',
    'אדר', 'ניסן', 'אייר', 'סיון', 'תמוז', 'אב', 'אלול',
)
HEBREW_MONTH_NAMES_LEAP = HEBREW_MONTH_NAMES[:5] + ('אדר א׳', 'אדר ב׳') + HEBREW_MONTH_NAMES[7:]


def is_leap_year(year):
    return year % 19 in LEAP_YEARS_IN_CYCLE


def months_elapsed(year):
    """Number of months between the molad BaHaRaD and Tishri of `year`."""
    return (235 * year - 234) // 19


def molad(year):
    """Returns the molad of Tishri of `year` as a (day, halakim) tuple.

    The day is counted from the Sunday before the first molad, the halakim
    (1/1080 of an hour) from 6pm the evening before that day.
    """
    return divmod(MOLAD_BAHARAD + months_elapsed(year) * HALAKIM_PER_MONTH, HALAKIM_PER_DAY)


@lru_cache(maxsize=4096)
def new_year(year):
    """Returns the Julian day of 1 Tishri of `year`."""
    day, halakim = molad(year)
    weekday = day % 7
    if halakim >= MOLAD_ZAKEN:
        day += 1
    elif weekday == TUESDAY and halakim >= GATARAD and not is_leap_year(year):
        day += 1
    elif weekday == MONDAY and halakim >= BETUTAKPAT and is_leap_year(year - 1):
        day += 1
    # Lo ADU Rosh
    if day % 7 in (SUNDAY, WEDNESDAY, FRIDAY):
        day += 1
    return day + JD_OFFSET


def year_length(year):
    return new_year(year + 1) - new_year(year)


class JewishCalendar(Calendar):

    name = 'Jewish'
    symbol = 'CAL_JEWISH'
    number = 2
    gedcom_escape = '@#DHEBREW@'

    # 1 Tishri AM 1
    jd_start = 347998
    # Same limit as PHP, to keep the molad arithmetic within 64 bits
    jd_end = 324542846

    # Hebrew text is only defined for years 1 to 9999
    jd_end_hebrew = 4000075

    max_months_in_year = 13
    max_days_in_month = 30

    def __init__(self, emulate_bug_54254=False):
        self.emulate_bug_54254 = emulate_bug_54254
        if emulate_bug_54254:
            self.month_names = MONTH_NAMES_54254
        else:
            self.month_names = MONTH_NAMES_LEAP

    def __repr__(self):
        if self.emulate_bug_54254:
            return '<JewishCalendar emulate_bug_54254>'
        return '<JewishCalendar>'

    def is_leap_year(self, year):
        return is_leap_year(year)

    def check_year(self, year):
        if year < 1:
            raise DateOutOfRange('year %r is before the start of the Jewish calendar' % (year,))

    def months_in_year(self, year):
        return 13 if is_leap_year(year) else 12

    def new_year(self, year):
        self.check_year(year)
        return new_year(year)

    def molad(self, year):
        return molad(year)

    def year_length(self, year):
        self.check_year(year)
        return year_length(year)

    def year_type(self, year):
        return YEAR_TYPES[self.year_length(year)]

    def month_lengths(self, year):
        lengths = MONTH_LENGTHS[year_length(year)]
        if self.emulate_bug_54254 and not lengths[5]:
            # Adar of a common year used to be numbered 6
            lengths = lengths[:5] + (lengths[6], 0) + lengths[7:]
        return lengths

    def _ymd_to_jd(self, year, month, day):
        return new_year(year) + sum(self.month_lengths(year)[:month - 1]) + day - 1

    def _jd_to_ymd(self, jd):
        # Estimate the year from the mean length of a year (235/19 lunar
        # months), then correct the guess with the actual start of years.
        year = (jd - self.jd_start) * 19 * HALAKIM_PER_DAY // (235 * HALAKIM_PER_MONTH) + 1
        while new_year(year + 1) <= jd:
            year += 1
        while year > 1 and new_year(year) > jd:
            year -= 1
        day = jd - new_year(year)
        for month, length in enumerate(self.month_lengths(year), 1):
            if day < length:
                return year, month, day + 1
            day -= length
        raise AssertionError('Julian day %i not found in year %i' % (jd, year))

    def month_names_of_year(self, year, abbreviated=False):
        if self.emulate_bug_54254:
            return MONTH_NAMES_54254
        return MONTH_NAMES_LEAP if is_leap_year(year) else MONTH_NAMES

    def month_name(self, month, abbreviated=False, year=None):
        """Returns the name of a month, in a leap year unless `year` says otherwise."""
        if year is None:
            return super().month_name(month, abbreviated)
        if not 1 <= month <= self.max_months_in_year:
            raise InvalidCalendarField('invalid month %r' % (month,))
        return self.month_names_of_year(year)[month - 1]

    def jd_to_hebrew(self, jd, alafim_garesh=False, alafim=False, gereshayim=False):
        """Returns a Julian day as a Jewish date in Hebrew, e.g. "ג תשרי התשפד".
        """
        if not self.jd_start <= jd <= self.jd_end_hebrew:
            raise DateOutOfRange('Year out of range (0-9999)')
        year, month, day = self.jd_to_ymd(jd)
        months = HEBREW_MONTH_NAMES_LEAP if is_leap_year(year) else HEBREW_MONTH_NAMES
        return ' '.join((
            format_hebrew_number(day, alafim_garesh, alafim, gereshayim),
            months[month - 1],
            format_hebrew_number(year, alafim_garesh, alafim, gereshayim),
        ))


jewish_calendar = JewishCalendar()
