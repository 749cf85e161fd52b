"""
A module to handle dates from the French Republican Calendar
"""

import re

from .calendar import Calendar
from .exceptions import DateOutOfRange, InvalidCalendarField
from .gregorian import gregorian_calendar
from .roman import decimal_to_roman, roman_to_decimal, ROMAN_PATTERN
from .utils import strip_down, strip_prefix


MOIS_GREG = 'janvier février mars avril mai juin juillet août septembre octobre novembre décembre'.split()
MOIS_GREG_MAP = {strip_down(m): i for i, m in enumerate(MOIS_GREG, 1)}
MOIS_REPU = 'vendémiaire brumaire frimaire nivôse pluviôse ventôse germinal floréal prairial messidor thermidor fructidor'.split()
MOIS_REPU_MAP = {strip_down(m): i for i, m in enumerate(MOIS_REPU, 1)}
SANSCULOTTIDES = (
    "Jour de la vertu", "Jour du génie", "Jour du travail",
    "Jour de l'opinion", "Jour des récompenses", "Jour de la révolution"
)
SANSCULOTTIDES_MAP = {strip_down(d): i for i, d in enumerate(SANSCULOTTIDES, 1)}

# The names used by PHP's calendar extension, without accents
MONTH_NAMES = (
    'Vendemiaire', 'Brumaire', 'Frimaire', 'Nivose', 'Pluviose', 'Ventose',
    'Germinal', 'Floreal', 'Prairial', 'Messidor', 'Thermidor', 'Fructidor', 'Extra',
)

MONTH_LENGTHS = (30,) * 12 + (5,)
MONTH_LENGTHS_LEAP = (30,) * 12 + (6,)


class FrenchCalendar(Calendar):
    """The calendar used in France from 1793 to 1805.

    Leap years were based on astronomical observations, only years 3, 7 and
    11 were ever observed. Here every year such that `year % 4 == 3` is a
    leap year, as in other implementations.
    """

    name = 'French'
    symbol = 'CAL_FRENCH'
    number = 3
    gedcom_escape = '@#DFRENCH R@'

    # 1 Vendémiaire I (22 September 1792)
    jd_start = 2375840
    # The calendar was abolished on 10 Nivôse XIV, but conversions are
    # accepted until the end of year XIV for compatibility with PHP.
    jd_end = 2380952

    first_year = 1
    last_year = 14

    max_months_in_year = 13
    max_days_in_month = 30

    month_names = MONTH_NAMES

    def is_leap_year(self, year):
        return year % 4 == 3

    def check_year(self, year):
        if not self.first_year <= year <= self.last_year:
            raise DateOutOfRange(
                'year %r is outside of the French calendar (%i to %i)' %
                (year, self.first_year, self.last_year)
            )

    def month_lengths(self, year):
        return MONTH_LENGTHS_LEAP if self.is_leap_year(year) else MONTH_LENGTHS

    def _ymd_to_jd(self, year, month, day):
        return 2375444 + day + month * 30 + year * 365 + year // 4

    def _jd_to_ymd(self, jd):
        year = (jd - 2375109) * 4 // 1461 - 1
        month = (jd - 2375475 - year * 365 - year // 4) // 30 + 1
        day = jd - 2375444 - month * 30 - year * 365 - year // 4
        return year, month, day


french_calendar = FrenchCalendar()


def gregorian_to_republican(year, month, day):
    jd = gregorian_calendar.ymd_to_jd(year, month, day)
    year, month, day = french_calendar.jd_to_ymd(jd)
    if month == 13:
        day = SANSCULOTTIDES[day - 1]
        month = None
    else:
        month = MOIS_REPU[month - 1]
    return year, month, day


def parse_year(annee):
    if annee.isdigit():
        return int(annee)
    try:
        return roman_to_decimal(annee)
    except ValueError:
        raise InvalidCalendarField('"%s" is not a republican year' % annee)


def republican_to_jd(year, month, day):
    if not isinstance(year, int):
        year = parse_year(year)
    if month:
        try:
            month = MOIS_REPU_MAP[strip_down(month)]
        except KeyError:
            raise InvalidCalendarField('"%s" is not a republican month' % month)
    else:
        month = 13
        try:
            day = SANSCULOTTIDES_MAP[strip_down(day)]
        except KeyError:
            raise InvalidCalendarField('"%s" is not a complementary day' % day)
    return french_calendar.ymd_to_jd(year, month, day)


def republican_to_gregorian(year, month, day):
    return gregorian_calendar.jd_to_ymd(republican_to_jd(year, month, day))


def format_republican(jd):
    """
    >>> format_republican(2375840)
    '1er vendémiaire an I'
    """
    year, month, day = french_calendar.jd_to_ymd(jd)
    year = 'an ' + decimal_to_roman(year)
    if month == 13:
        return '%s %s' % (SANSCULOTTIDES[day - 1].lower(), year)
    day = '1er' if day == 1 else str(day)
    return '%s %s %s' % (day, MOIS_REPU[month - 1], year)


jour_p = r'(?P<jour>1er|[0-9]{1,2})'
mois_p = r'(?P<mois>%s)' % '|'.join(MOIS_REPU_MAP)
sansculottide_p = r'(?P<sansculottide>%s)' % '|'.join(re.escape(d) for d in SANSCULOTTIDES_MAP)
annee_p = r'(an )?(?P<annee>%s|[0-9]{1,2})' % ROMAN_PATTERN.lower()
republican_date_re = re.compile(
    r'(%(jour_p)s %(mois_p)s|%(sansculottide_p)s),? %(annee_p)s' % globals()
)


def parse_republican(text):
    """Returns the Julian day of a date like "15 brumaire an VIII".

    >>> parse_republican("Jour de la Vertu an II")
    2376565
    """
    m = republican_date_re.fullmatch(strip_down(text))
    if not m:
        raise InvalidCalendarField('"%s" is not a republican date' % text)
    year = parse_year(m.group('annee'))
    if m.group('sansculottide'):
        return republican_to_jd(year, None, m.group('sansculottide'))
    day = int(m.group('jour').replace('1er', '1'))
    return republican_to_jd(year, m.group('mois'), day)


def convert_date_to_iso(jour, mois, annee):
    if not jour or not mois or not annee:
        return None, 'gregorian'
    jour = int(jour.lower().replace('1er', '1'))
    if strip_down(mois) in MOIS_REPU_MAP:
        annee = strip_prefix(annee, 'an ')
        y, m, d = republican_to_gregorian(annee, mois, jour)
        return '%04i-%02i-%02i' % (y, m, d), 'republican'
    else:
        mois = MOIS_GREG_MAP[strip_down(mois)]
        gregorian_calendar.ymd_to_jd(int(annee), mois, jour)
        return '%04i-%02i-%02i' % (int(annee), mois, jour), 'gregorian'
