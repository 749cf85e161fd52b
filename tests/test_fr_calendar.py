from datetime import date, timedelta

import pytest

from extcal import DateOutOfRange, InvalidCalendarField
from extcal.fr_calendar import (
    MOIS_REPU, SANSCULOTTIDES, convert_date_to_iso, format_republican,
    french_calendar, gregorian_to_republican, parse_republican,
    republican_to_gregorian, republican_to_jd,
)
from extcal.gregorian import gregorian_calendar


REPUBLICAN_START_DATE = date(1792, 9, 22)


def test_continuity():
    one_day = timedelta(days=1)
    greg = REPUBLICAN_START_DATE
    for year in range(1, 15):
        for month in MOIS_REPU:
            for day in range(1, 31):
                assert republican_to_gregorian(year, month, day) == (greg.year, greg.month, greg.day)
                assert gregorian_to_republican(greg.year, greg.month, greg.day) == (year, month, day)
                greg += one_day
        for day in SANSCULOTTIDES[:5 + (year % 4 == 3)]:
            assert republican_to_gregorian(year, None, day) == (greg.year, greg.month, greg.day)
            assert gregorian_to_republican(greg.year, greg.month, greg.day) == (year, None, day)
            greg += one_day
    assert gregorian_calendar.ymd_to_jd(greg.year, greg.month, greg.day) == french_calendar.jd_end + 1


def test_epoch():
    assert french_calendar.ymd_to_jd(1, 1, 1) == 2375840 == french_calendar.jd_start
    assert french_calendar.jd_to_ymd(2375840) == (1, 1, 1)
    assert french_calendar.jd_to_ymd(french_calendar.jd_end) == (14, 13, 5)


def test_round_trip():
    for jd in range(french_calendar.jd_start, french_calendar.jd_end + 1):
        assert french_calendar.ymd_to_jd(*french_calendar.jd_to_ymd(jd)) == jd


def test_leap_years():
    assert french_calendar.is_leap_year(3)
    assert not french_calendar.is_leap_year(4)
    assert [y for y in range(1, 15) if french_calendar.is_leap_year(y)] == [3, 7, 11]
    assert french_calendar.days_in_month(3, 13) == 6
    assert french_calendar.days_in_month(4, 13) == 5
    assert french_calendar.days_in_year(3) == 366


def test_invalid_dates():
    with pytest.raises(InvalidCalendarField):
        french_calendar.ymd_to_jd(1, 14, 1)
    with pytest.raises(InvalidCalendarField):
        french_calendar.ymd_to_jd(2, 13, 6)
    with pytest.raises(InvalidCalendarField):
        french_calendar.ymd_to_jd(2, 1, 31)
    with pytest.raises(DateOutOfRange):
        french_calendar.ymd_to_jd(15, 1, 1)
    with pytest.raises(DateOutOfRange):
        french_calendar.ymd_to_jd(0, 1, 1)
    with pytest.raises(DateOutOfRange):
        french_calendar.jd_to_ymd(french_calendar.jd_start - 1)
    with pytest.raises(DateOutOfRange):
        french_calendar.jd_to_ymd(french_calendar.jd_end + 1)


def test_month_names():
    assert french_calendar.month_name(1) == 'Vendemiaire'
    assert french_calendar.month_name(13) == 'Extra'
    assert french_calendar.month_name(4, abbreviated=True) == 'Nivose'
    with pytest.raises(InvalidCalendarField):
        french_calendar.month_name(0)


def test_format_republican():
    assert format_republican(2375840) == '1er vendémiaire an I'
    assert format_republican(2375840 + 31) == '2 brumaire an I'
    # 18 brumaire an VIII
    jd = gregorian_calendar.ymd_to_jd(1799, 11, 9)
    assert format_republican(jd) == '18 brumaire an VIII'
    assert format_republican(french_calendar.ymd_to_jd(3, 13, 6)) == 'jour de la révolution an III'


def test_parse_republican():
    assert parse_republican('18 Brumaire an VIII') == gregorian_calendar.ymd_to_jd(1799, 11, 9)
    assert parse_republican('1er vendemiaire an I') == 2375840
    assert parse_republican('9 thermidor an 2') == gregorian_calendar.ymd_to_jd(1794, 7, 27)
    assert parse_republican("Jour de l'Opinion, an IV") == french_calendar.ymd_to_jd(4, 13, 4)
    with pytest.raises(InvalidCalendarField):
        parse_republican('18 brumaire 1799')
    with pytest.raises(InvalidCalendarField):
        parse_republican('jour de la révolution an II')
    with pytest.raises(InvalidCalendarField, match='not a republican year'):
        parse_republican('1er vendemiaire an ic')
    with pytest.raises(InvalidCalendarField):
        republican_to_jd('IC', 'brumaire', 1)


def test_convert_date_to_iso():
    assert convert_date_to_iso('1', 'vendemiaire', 'an I')[0] == '1792-09-22'
    assert convert_date_to_iso('1er', 'Nivôse', 'an XIV') == ('1805-12-22', 'republican')
    assert convert_date_to_iso('14', 'juillet', '1789') == ('1789-07-14', 'gregorian')
    assert convert_date_to_iso(None, 'juillet', '1789') == (None, 'gregorian')
