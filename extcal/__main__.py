"""
Command line interface: `python -m extcal <command> ...`
"""

from argparse import ArgumentParser
import json

from . import CAL_FRENCH, CAL_JEWISH, CALENDARS_BY_NAME, get_calendar
from .days import day_name
from .exceptions import CalendarError
from .fr_calendar import format_republican, parse_republican
from .shim import (
    CAL_EASTER_ALWAYS_GREGORIAN, CAL_EASTER_ALWAYS_JULIAN, CAL_EASTER_DEFAULT,
    CAL_EASTER_ROMAN, LEGACY, MODERN, cal_info, easter_days,
)
from .utils import log


EASTER_METHODS = {
    'default': CAL_EASTER_DEFAULT,
    'roman': CAL_EASTER_ROMAN,
    'gregorian': CAL_EASTER_ALWAYS_GREGORIAN,
    'julian': CAL_EASTER_ALWAYS_JULIAN,
}


def format_ymd(ymd):
    return '%i-%02i-%02i' % ymd


def calendar_for(name, compat):
    calendar = get_calendar(name)
    if calendar.number == CAL_JEWISH:
        return compat.jewish_calendar
    return calendar


def main(args):
    compat = LEGACY if args.compat == 'legacy' else MODERN
    if args.command == 'convert':
        jd = calendar_for(args.src, compat).ymd_to_jd(args.year, args.month, args.day)
        print(format_ymd(calendar_for(args.dst, compat).jd_to_ymd(jd)), day_name(jd))
    elif args.command == 'tojd':
        print(calendar_for(args.calendar, compat).ymd_to_jd(args.year, args.month, args.day))
    elif args.command == 'fromjd':
        calendar = calendar_for(args.calendar, compat)
        if args.hebrew:
            if calendar.number != CAL_JEWISH:
                raise SystemExit("--hebrew only applies to the jewish calendar")
            print(calendar.jd_to_hebrew(args.jd, args.geresh, args.alafim, args.gershayim))
        elif calendar.number == CAL_FRENCH and args.text:
            print(format_republican(args.jd))
        else:
            year, month, day = calendar.jd_to_ymd(args.jd)
            print(format_ymd((year, month, day)), calendar.month_names_of_year(year)[month - 1])
    elif args.command == 'info':
        number = get_calendar(args.calendar).number
        print(json.dumps(cal_info(number, compat), indent=4, ensure_ascii=False))
    elif args.command == 'easter':
        days = easter_days(args.year, EASTER_METHODS[args.method])
        month, day = (3, days + 21) if days < 11 else (4, days - 10)
        print('%i-%02i-%02i' % (args.year, month, day))
    elif args.command == 'republican':
        jd = parse_republican(args.text)
        log('Julian day %i' % jd)
        print(format_ymd(get_calendar('gregorian').jd_to_ymd(jd)))


def get_parser():
    calendars = sorted(CALENDARS_BY_NAME)
    p = ArgumentParser(prog='extcal')
    p.add_argument('--compat', default='modern', choices=['modern', 'legacy'],
                   help="the version of PHP's calendar extension to emulate")
    sub = p.add_subparsers(dest='command', required=True)

    c = sub.add_parser('convert', help="convert a date from one calendar to another")
    c.add_argument('src', choices=calendars)
    c.add_argument('dst', choices=calendars)
    c.add_argument('year', type=int)
    c.add_argument('month', type=int)
    c.add_argument('day', type=int)

    c = sub.add_parser('tojd', help="convert a date to a Julian day")
    c.add_argument('calendar', choices=calendars)
    c.add_argument('year', type=int)
    c.add_argument('month', type=int)
    c.add_argument('day', type=int)

    c = sub.add_parser('fromjd', help="convert a Julian day to a date")
    c.add_argument('calendar', choices=calendars)
    c.add_argument('jd', type=int)
    c.add_argument('--text', action='store_true', default=False,
                   help="write French republican dates in words")
    c.add_argument('--hebrew', action='store_true', default=False,
                   help="write Jewish dates in Hebrew")
    c.add_argument('--geresh', action='store_true', default=False)
    c.add_argument('--alafim', action='store_true', default=False)
    c.add_argument('--gershayim', action='store_true', default=False)

    c = sub.add_parser('info', help="describe a calendar")
    c.add_argument('calendar', choices=calendars)

    c = sub.add_parser('easter', help="date of Easter Sunday, in the calendar of the method")
    c.add_argument('year', type=int)
    c.add_argument('--method', default='default', choices=sorted(EASTER_METHODS))

    c = sub.add_parser('republican', help="parse a French republican date")
    c.add_argument('text')
    return p


if __name__ == '__main__':
    args = get_parser().parse_args()
    try:
        main(args)
    except CalendarError as e:
        raise SystemExit(str(e))
