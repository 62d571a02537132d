from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect

from .core.errors import CalendarError
from .core.time import epoch_day_to_jdn, jdn_to_epoch_day, to_epoch_day


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_JDN_RE = re.compile(r"^JD(\d+)$", re.IGNORECASE)


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_day(s: str) -> int:
    """An epoch day, an ISO Gregorian date YYYY-MM-DD, or a Julian day number JD<n>."""
    if _DATE_RE.match(s):
        return to_epoch_day(_parse_ymd(s))
    m = _JDN_RE.match(s)
    if m:
        return jdn_to_epoch_day(int(m.group(1)))
    try:
        return int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an epoch day, YYYY-MM-DD or JD<n>, got {s!r}") from None


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_format(args: argparse.Namespace) -> int:
    import worldcal

    print(worldcal.format_date(args.day, calendar=args.calendar, pattern=args.pattern))
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    import worldcal

    print(worldcal.parse_date(args.text, calendar=args.calendar, pattern=args.pattern))
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    import worldcal

    day = worldcal.parse_date(args.text, calendar=args.source)
    print(worldcal.format_date(day, calendar=args.target, pattern=args.pattern))
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    import worldcal

    info = worldcal.day_info(args.day, calendar=args.calendar)
    print(f"epoch day : {info.epoch_day}")
    print(f"jdn       : {epoch_day_to_jdn(info.epoch_day)}")
    print(f"calendar  : {info.calendar}")
    print(f"text      : {info.text}")
    print(f"year/day  : {info.year_day.year} / {info.year_day.day_of_year} ({info.year_day.era.full})")
    if info.date is not None:
        print(f"date      : {info.date.day_of_month} {info.date.month.full} {abs(info.date.year)} {info.date.era.short}")
    if info.weekday is not None:
        print(f"weekday   : {info.weekday.name}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    import worldcal

    for name in worldcal.list_calendars():
        ci = worldcal.calendar_info(name)
        months = f", {len(ci['months'])} months" if "months" in ci else ""
        week = f", {len(ci['weekdays'])}-day week" if "weekdays" in ci else ""
        print(f"{name:16s} {ci['era']} / {ci['prior_era']}{months}{week}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="worldcal", description="Worldbuilding calendar toolkit CLI.")
    p.add_argument("--config", action="append", default=[], metavar="FILE",
                   help="JSON calendar definitions to load and register (repeatable)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_fmt = sub.add_parser("format", help="Epoch day (or YYYY-MM-DD, or JD<n>) -> calendar text")
    p_fmt.add_argument("day", type=_parse_day)
    p_fmt.add_argument("--calendar", default="gregorian")
    p_fmt.add_argument("--pattern", default=None, help="date pattern, e.g. \"yyyy'-'mm'-'dd' 'E\"")

    p_parse = sub.add_parser("parse", help="Calendar text -> epoch day")
    p_parse.add_argument("text")
    p_parse.add_argument("--calendar", default="gregorian")
    p_parse.add_argument("--pattern", default=None)

    p_conv = sub.add_parser("convert", help="Text in one calendar -> text in another")
    p_conv.add_argument("text")
    p_conv.add_argument("--from", dest="source", default="gregorian")
    p_conv.add_argument("--to", dest="target", required=True)
    p_conv.add_argument("--pattern", default=None)

    p_info = sub.add_parser("info", help="All coordinates of one day")
    p_info.add_argument("day", type=_parse_day)
    p_info.add_argument("--calendar", default="gregorian")

    sub.add_parser("list", help="List registered calendars")

    # diagnostics
    sub.add_parser("pretty-month", help="Print a month laid out on its week (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.config:
            import worldcal
            for path in args.config:
                worldcal.load_config(path, register=True, overwrite=True)

        if args.cmd == "pretty-month":
            return _run_module_main("worldcal.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "worldcal.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)

        if rest:
            p.error(f"unrecognized arguments: {' '.join(rest)}")

        handlers = {
            "format": cmd_format,
            "parse": cmd_parse,
            "convert": cmd_convert,
            "info": cmd_info,
            "list": cmd_list,
        }
        return handlers[args.cmd](args)
    except CalendarError as e:
        print(f"worldcal: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
