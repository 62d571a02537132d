from __future__ import annotations

import argparse

import worldcal


def cell(text: str, w: int) -> str:
    return text[:w].rjust(w)


def month_grid(calendar: str, year: int, month: int) -> list[str]:
    """Lines of a month laid out on the calendar's week, one row per cycle."""
    cal = worldcal.get_calendar(calendar)
    first = cal.date_to_day(cal.date(year, month, 1))
    n = cal.days_in_month(year, month)
    weekdays = cal.week.weekdays
    w = max(3, max(len(wd.short) for wd in weekdays))

    title = worldcal.format_date(first, calendar=calendar, pattern="MMMM' 'y' 'EEEE")
    header = " ".join(cell(wd.short, w) for wd in weekdays)
    lines = [title, header, "-" * len(header)]

    row = [cell("", w)] * cal.day_to_day_of_week(first)
    for dom in range(1, n + 1):
        row.append(cell(str(dom), w))
        if len(row) == len(weekdays):
            lines.append(" ".join(row))
            row = []
    if row:
        lines.append(" ".join(row))
    return lines


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a month of a calendar laid out on its week.")
    p.add_argument("year", type=int, help="Year; negative for the prior era")
    p.add_argument("month", type=int, help="Month of year, 1-based")
    p.add_argument("--calendar", default="gregorian")
    args = p.parse_args(argv)

    for line in month_grid(args.calendar, args.year, args.month):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
