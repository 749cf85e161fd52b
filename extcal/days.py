"""
Services working on the Julian day itself: day of the week, month names and
the link with Unix time.
"""


DAY_NAMES = ('Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday')
DAY_NAMES_SHORT = tuple(d[:3] for d in DAY_NAMES)

# Julian day of 1 January 1970
UNIX_EPOCH_JD = 2440588
SECONDS_PER_DAY = 86400


def day_of_week(jd):
    """Returns the day of the week, from 0 (Sunday) to 6 (Saturday).

    >>> day_of_week(0)
    1
    >>> day_of_week(-1)
    0
    """
    # Python's modulo is never negative, even for days before the epoch
    return (jd + 1) % 7


def day_name(jd, abbreviated=False):
    names = DAY_NAMES_SHORT if abbreviated else DAY_NAMES
    return names[day_of_week(jd)]


def month_name(calendar, jd, abbreviated=False):
    """Returns the name of the month containing `jd` in `calendar`.

    The Jewish calendar names months differently in leap years, so the name
    table is chosen from the year of `jd`.
    """
    year, month, day = calendar.jd_to_ymd(jd)
    return calendar.month_names_of_year(year, abbreviated)[month - 1]


def jd_to_unix_day(jd):
    return jd - UNIX_EPOCH_JD


def unix_day_to_jd(day):
    return day + UNIX_EPOCH_JD
