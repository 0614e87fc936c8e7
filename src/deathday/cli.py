from __future__ import annotations

import argparse
import sys
from typing import Optional

from .api import check_age, explain, make_profile, predict, validate_birthday
from .causes import DEFAULT_CAUSES, load_causes
from .core.date import CalendarDate
from .core.errors import DeathdayError, ProfileError
from .core.profile import MAX_LIFESPAN_YEARS
from .engines.distribution import DEFAULT_DISTRIBUTION, list_distributions


def print_error(err: object) -> None:
    print(f"Error: {err}", file=sys.stderr)


def _parse_today(s: Optional[str]) -> CalendarDate:
    return CalendarDate.today() if s is None else CalendarDate.parse(s)


def _check_birthday(text: str, today: CalendarDate, max_lifespan: int) -> CalendarDate:
    birthday = validate_birthday(text, today)
    check_age(birthday, today, max_lifespan)
    return birthday


def ask_name() -> str:
    return input("What is your name? ").strip()


def ask_birthday(today: CalendarDate, max_lifespan: int = MAX_LIFESPAN_YEARS) -> CalendarDate:
    """Asks until a valid birthday is typed in."""
    while True:
        text = input("When were you born (DD/MM/YYYY)? ").strip()
        try:
            return _check_birthday(text, today, max_lifespan)
        except DeathdayError as e:
            print_error(e)


def _add_causes_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-d", "--death-reasons",
        metavar="FILE",
        help="custom death reasons file, one per line (default: built-in list)",
    )


def _add_today_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("--today", metavar="DD/MM/YYYY", help="reference date (default: today)")


def cmd_predict(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="deathday",
        description="A program that predicts your death date.",
        epilog="Other commands: 'deathday date TEXT', 'deathday causes'.",
    )
    p.add_argument("-n", "--name", help="your name (asked for if omitted)")
    p.add_argument("-b", "--birthday", help="your birthday, DD/MM/YYYY (asked for if omitted)")
    _add_causes_arg(p)
    p.add_argument("--distribution", choices=list_distributions(), default=DEFAULT_DISTRIBUTION)
    p.add_argument(
        "--max-lifespan",
        type=int,
        default=MAX_LIFESPAN_YEARS,
        help=f"upper bound on the predicted age (default: {MAX_LIFESPAN_YEARS})",
    )
    _add_today_arg(p)
    p.add_argument("--debug", action="store_true", help="print intermediate values")
    args = p.parse_args(argv)

    # Flag-supplied values are checked up front; a bad one ends the run.
    try:
        if args.max_lifespan < 1:
            raise ProfileError(f"--max-lifespan must be a positive number of years, got {args.max_lifespan}")
        today = _parse_today(args.today)
        causes = DEFAULT_CAUSES if args.death_reasons is None else load_causes(args.death_reasons)
        birthday = None
        if args.birthday is not None:
            birthday = _check_birthday(args.birthday.strip(), today, args.max_lifespan)
    except DeathdayError as e:
        print_error(e)
        return 1

    try:
        name = args.name if args.name is not None else ask_name()
        if birthday is None:
            birthday = ask_birthday(today, args.max_lifespan)
    except (EOFError, KeyboardInterrupt):
        print()
        print_error("no input")
        return 1

    try:
        profile = make_profile(name, birthday, causes, today=today, max_lifespan=args.max_lifespan)
        result = predict(profile, today=today, distribution=args.distribution)
    except DeathdayError as e:
        print_error(e)
        return 1

    print()
    print("DATE OF DEATH")
    print(result.date)
    print(f"Be aware of: {result.cause}")

    if args.debug:
        print()
        for key, value in explain(profile, today=today, distribution=args.distribution).items():
            print(f"  {key:<16}= {value}")

    return 0


def cmd_date(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="deathday date", description="Parse a DD/MM/YYYY date and describe it")
    p.add_argument("date", help="DD/MM/YYYY; '.', '-' or a space also separate")
    _add_today_arg(p)
    args = p.parse_args(argv)

    try:
        today = _parse_today(args.today)
        d = CalendarDate.parse(args.date.strip())
    except DeathdayError as e:
        print_error(e)
        return 1

    rel = "from now" if d > today else "ago"
    print(d)
    print(f"  leap year      : {'yes' if d.is_leap_year() else 'no'}")
    print(f"  days in month  : {d.max_day()}")
    print(f"  full years     : {d.years_from(today)} ({rel})")
    return 0


def cmd_causes(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="deathday causes", description="List the active death reasons")
    _add_causes_arg(p)
    args = p.parse_args(argv)

    try:
        causes = DEFAULT_CAUSES if args.death_reasons is None else load_causes(args.death_reasons)
    except DeathdayError as e:
        print_error(e)
        return 1

    for c in causes:
        print(c)
    return 0


_COMMANDS = {
    "predict": cmd_predict,
    "date": cmd_date,
    "causes": cmd_causes,
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Plain `deathday [options]` is the predict command.
    if argv and argv[0] in _COMMANDS:
        return _COMMANDS[argv[0]](argv[1:])
    return cmd_predict(argv)


if __name__ == "__main__":
    raise SystemExit(main())
