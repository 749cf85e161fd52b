"""
The contract shared by the four calendar algorithms.

A calendar converts between a (year, month, day) triple and a Julian Day
number. Instances hold no state beyond constant configuration, so a single
instance of each can be shared freely, including between threads.
"""

from .exceptions import DateOutOfRange, InvalidCalendarField


class Calendar:

    # Metadata used by the compatibility layer (see shim.py)
    name = None
    symbol = None
    number = None
    gedcom_escape = None

    # The first and last Julian days that `jd_to_ymd` accepts, None for no limit
    jd_start = None
    jd_end = None

    max_months_in_year = 12
    max_days_in_month = 31

    month_names = ()
    month_names_short = ()

    def __repr__(self):
        return '<%s>' % self.__class__.__name__

    def is_leap_year(self, year):
        raise NotImplementedError

    def check_year(self, year):
        """Accepts every year, subclasses narrow it to their own range."""

    def month_lengths(self, year):
        """Returns the lengths of the months of `year`, a 0 marking a month
        which doesn't exist that year.
        """
        raise NotImplementedError

    def months_in_year(self, year):
        return self.max_months_in_year

    def days_in_month(self, year, month):
        self.check_year(year)
        if not 1 <= month <= self.max_months_in_year:
            raise InvalidCalendarField('invalid month %r' % (month,))
        days = self.month_lengths(year)[month - 1]
        if not days:
            raise InvalidCalendarField('there is no month %i in year %i' % (month, year))
        return days

    def days_in_year(self, year):
        self.check_year(year)
        return sum(self.month_lengths(year))

    def check_jd(self, jd):
        if self.jd_start is not None and jd < self.jd_start or \
           self.jd_end is not None and jd > self.jd_end:
            raise DateOutOfRange(
                'Julian day %i is outside of the %s calendar (%s to %s)' %
                (jd, self.name, self.jd_start, self.jd_end)
            )

    def ymd_to_jd(self, year, month, day):
        if not 1 <= day <= self.days_in_month(year, month):
            raise InvalidCalendarField(
                'invalid day %r for month %i of year %i' % (day, month, year)
            )
        jd = self._ymd_to_jd(year, month, day)
        self.check_jd(jd)
        return jd

    def jd_to_ymd(self, jd):
        self.check_jd(jd)
        return self._jd_to_ymd(jd)

    def _ymd_to_jd(self, year, month, day):
        raise NotImplementedError

    def _jd_to_ymd(self, jd):
        raise NotImplementedError

    def month_names_of_year(self, year, abbreviated=False):
        if abbreviated and self.month_names_short:
            return self.month_names_short
        return self.month_names

    def month_name(self, month, abbreviated=False):
        if not 1 <= month <= self.max_months_in_year:
            raise InvalidCalendarField('invalid month %r' % (month,))
        names = self.month_names_short if abbreviated and self.month_names_short else self.month_names
        return names[month - 1]
