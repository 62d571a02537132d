from __future__ import annotations

import argparse
import random
from typing import List

import worldcal


def parse_calendars(s: str) -> List[str]:
    # "gregorian,epoch" -> ["gregorian", "epoch"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    span: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """Random epoch days in [-span, span] through every coordinate and text form and back."""
    random.seed(seed)
    cal = worldcal.get_calendar(calendar)
    failures = 0

    for _ in range(N):
        d0 = random.randint(-span, span)

        back = {"year_day": cal.year_day_to_day(cal.day_to_year_day(d0))}
        back["text"] = cal.parse_date(cal.format_date(d0))
        if cal.has_months():
            back["date"] = cal.date_to_day(cal.day_to_date(d0))

        bad = {k: v for k, v in back.items() if v != d0}
        if bad:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("d0:", d0)
            print("info:", worldcal.day_info(d0, calendar=calendar))
            print("back:", bad)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: epoch day -> coordinates -> epoch day.")
    p.add_argument("--calendars", type=str, default=",".join(worldcal.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--span", type=int, default=200_000, help="Largest |epoch day| tried.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    total = 0
    for name in parse_calendars(args.calendars):
        f = roundtrip_test(name, args.N, args.span, args.seed, max_failures=args.max_failures)
        print(f"{name}: {args.N - f}/{args.N} ok")
        total += f
    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
