import pytest

from extcal import DateOutOfRange, InvalidCalendarField
from extcal.gregorian import gregorian_calendar
from extcal.jewish import (
    ABUNDANT, DEFICIENT, REGULAR, JewishCalendar, jewish_calendar, new_year,
)


def greg(year, month, day):
    return gregorian_calendar.ymd_to_jd(year, month, day)


def test_epoch():
    assert jewish_calendar.ymd_to_jd(1, 1, 1) == 347998 == jewish_calendar.jd_start
    assert jewish_calendar.jd_to_ymd(347998) == (1, 1, 1)
    # BaHaRaD: the molad of year 1 fell on a Monday, 5 hours and 204 parts
    assert jewish_calendar.molad(1) == (1, 5 * 1080 + 204)


def test_known_dates():
    assert jewish_calendar.ymd_to_jd(5784, 1, 1) == greg(2023, 9, 16)
    assert jewish_calendar.ymd_to_jd(5785, 1, 1) == greg(2024, 10, 3)
    assert jewish_calendar.ymd_to_jd(5786, 1, 1) == greg(2025, 9, 23)
    # Passover 5784
    assert jewish_calendar.ymd_to_jd(5784, 8, 15) == greg(2024, 4, 23)
    # First day of Hanukkah 5785
    assert jewish_calendar.jd_to_ymd(greg(2024, 12, 26)) == (5785, 3, 25)


def test_year_types():
    assert jewish_calendar.year_length(5784) == 383
    assert jewish_calendar.year_type(5784) == DEFICIENT
    assert jewish_calendar.year_length(5785) == 355
    assert jewish_calendar.year_type(5785) == ABUNDANT
    types = {jewish_calendar.year_type(y) for y in range(5700, 5800)}
    assert types == {DEFICIENT, REGULAR, ABUNDANT}


def test_year_lengths():
    for year in range(1, 6000):
        length = jewish_calendar.year_length(year)
        assert length in (353, 354, 355, 383, 384, 385)
        assert (length > 380) == jewish_calendar.is_leap_year(year)
        assert sum(jewish_calendar.month_lengths(year)) == length
        assert jewish_calendar.days_in_year(year) == length


def test_new_year_weekdays():
    # Lo ADU Rosh: never on Sunday, Wednesday or Friday
    for year in range(1, 10000):
        assert (new_year(year) + 1) % 7 not in (0, 3, 5)


def test_leap_years():
    for start in (1, 20, 5701):
        assert sum(jewish_calendar.is_leap_year(y) for y in range(start, start + 19)) == 7
    for year in range(1, 1000):
        assert jewish_calendar.is_leap_year(year) == jewish_calendar.is_leap_year(year + 19)
        assert jewish_calendar.months_in_year(year) == (13 if jewish_calendar.is_leap_year(year) else 12)
    assert [y for y in range(1, 20) if jewish_calendar.is_leap_year(y)] == [3, 6, 8, 11, 14, 17, 19]


def test_adar():
    # 5784 is a deficient leap year, 5781 a deficient common year
    assert jewish_calendar.year_length(5781) == 353
    assert jewish_calendar.months_in_year(5784) == 13
    adar_i = jewish_calendar.days_in_month(5784, 6)
    adar_ii = jewish_calendar.days_in_month(5784, 7)
    assert (adar_i, adar_ii) == (30, 29)
    # The intercalated month is Adar I, Adar II is as long as Adar
    assert adar_i + adar_ii == jewish_calendar.days_in_month(5781, 7) + 30
    with pytest.raises(InvalidCalendarField):
        jewish_calendar.days_in_month(5781, 6)
    with pytest.raises(InvalidCalendarField):
        jewish_calendar.ymd_to_jd(5781, 6, 1)
    assert jewish_calendar.ymd_to_jd(5781, 7, 1) == jewish_calendar.ymd_to_jd(5781, 5, 30) + 1


def test_round_trip_jd():
    for start in (347998, 2400000, 2460000):
        for jd in range(start, start + 20000):
            assert jewish_calendar.ymd_to_jd(*jewish_calendar.jd_to_ymd(jd)) == jd
    for jd in range(347998, jewish_calendar.jd_end, 1000003):
        assert jewish_calendar.ymd_to_jd(*jewish_calendar.jd_to_ymd(jd)) == jd
    year, month, day = jewish_calendar.jd_to_ymd(jewish_calendar.jd_end)
    assert jewish_calendar.ymd_to_jd(year, month, day) == jewish_calendar.jd_end


def test_round_trip_ymd():
    for year in (1, 2, 3, 5700, 5783, 5784, 5785, 9999):
        for month in range(1, 14):
            if month == 6 and not jewish_calendar.is_leap_year(year):
                continue
            for day in range(1, jewish_calendar.days_in_month(year, month) + 1):
                jd = jewish_calendar.ymd_to_jd(year, month, day)
                assert jewish_calendar.jd_to_ymd(jd) == (year, month, day)


def test_out_of_range():
    with pytest.raises(DateOutOfRange):
        jewish_calendar.jd_to_ymd(347997)
    with pytest.raises(DateOutOfRange):
        jewish_calendar.jd_to_ymd(jewish_calendar.jd_end + 1)
    with pytest.raises(DateOutOfRange):
        jewish_calendar.ymd_to_jd(0, 1, 1)
    with pytest.raises(DateOutOfRange):
        jewish_calendar.year_length(0)
    with pytest.raises(InvalidCalendarField):
        jewish_calendar.ymd_to_jd(5784, 14, 1)
    with pytest.raises(InvalidCalendarField):
        jewish_calendar.ymd_to_jd(5784, 1, 31)
    with pytest.raises(InvalidCalendarField):
        jewish_calendar.ymd_to_jd(5784, 2, 30)


def test_month_names():
    assert jewish_calendar.month_name(6) == 'Adar I'
    assert jewish_calendar.month_name(7) == 'Adar II'
    assert jewish_calendar.month_name(7, year=5785) == 'Adar'
    assert jewish_calendar.month_name(7, year=5784) == 'Adar II'
    assert jewish_calendar.month_name(13) == 'Elul'
    assert JewishCalendar(emulate_bug_54254=True).month_name(6) == 'AdarI'


def test_emulate_bug_54254():
    calendar = JewishCalendar(emulate_bug_54254=True)
    jd = jewish_calendar.ymd_to_jd(5785, 7, 1)
    assert calendar.jd_to_ymd(jd) == (5785, 6, 1)
    assert calendar.ymd_to_jd(5785, 6, 1) == jd
    with pytest.raises(InvalidCalendarField):
        calendar.ymd_to_jd(5785, 7, 1)
    # Leap years are not affected
    jd = jewish_calendar.ymd_to_jd(5784, 7, 1)
    assert calendar.jd_to_ymd(jd) == (5784, 7, 1)


def test_jd_to_hebrew():
    jd = greg(2023, 9, 16)
    assert jewish_calendar.jd_to_hebrew(jd) == 'א תשרי התשפד'
    assert jewish_calendar.jd_to_hebrew(jd, gereshayim=True) == 'א׳ תשרי התשפ״ד'
    assert jewish_calendar.jd_to_hebrew(jd, True, True, True) == 'א׳ תשרי ה׳ אלפים תשפ״ד'
    assert jewish_calendar.jd_to_hebrew(jewish_calendar.ymd_to_jd(5784, 6, 15)) == 'טו אדר א׳ התשפד'
    assert jewish_calendar.jd_to_hebrew(347998) == 'א תשרי א'
    assert jewish_calendar.jd_to_ymd(jewish_calendar.jd_end_hebrew)[0] == 9999
    with pytest.raises(DateOutOfRange):
        jewish_calendar.jd_to_hebrew(jewish_calendar.jd_end_hebrew + 1)
    with pytest.raises(DateOutOfRange):
        jewish_calendar.jd_to_hebrew(347997)


def test_convertdate():
    hebrew = pytest.importorskip('convertdate.hebrew')
    for year in list(range(1, 200)) + list(range(5500, 6000)):
        # Months are numbered from Nisan in convertdate
        assert jewish_calendar.new_year(year) == int(hebrew.to_jd(year, 7, 1) + 0.5)
        assert jewish_calendar.year_length(year) == hebrew.year_days(year)
        assert jewish_calendar.is_leap_year(year) == bool(hebrew.leap(year))
