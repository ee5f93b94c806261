from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from datetime import date
from urllib.parse import parse_qsl


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Labels for ComputationResult fields, in display order.
_RESULT_LABELS = (
    ("solar_birthday", "國曆生日"),
    ("lunar_birthday", "農曆生日"),
    ("today_solar", "今天（國曆）"),
    ("today_lunar", "今天（農曆）"),
    ("lunar_age", "農曆足歲"),
    ("virtual_age", "農曆虛歲"),
    ("age_note", "說明"),
    ("roc_year", "民國出生年"),
    ("gua_number", "後天卦數"),
    ("element_gua", "五行 / 卦象"),
    ("personality_type", "類型"),
    ("personality_text", "個性"),
    ("health_text", "健康"),
    ("kua_note", "命卦說明"),
)


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {s!r}, expected YYYY-MM-DD") from None


def _radius(s: str) -> int:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid radius {s!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError("radius must be >= 0")
    return n


def _today(d: date | None) -> date:
    # The CLI is the only caller that reads the clock.
    return d if d is not None else date.today()


def _print_outcome(outcome, as_json: bool) -> int:
    if not outcome.ok:
        if outcome.error:
            print(outcome.error, file=sys.stderr)
        return 2
    if as_json:
        print(json.dumps(outcome.result.as_dict(), ensure_ascii=False, indent=2))
        return 0
    data = outcome.result.as_dict()
    for key, label in _RESULT_LABELS:
        print(f"{label}: {data[key]}")
    return 0


def cmd_compute(argv: list[str]) -> int:
    import lunarfive
    from lunarfive.core.types import ComputeOutcome

    p = argparse.ArgumentParser(prog="lunarfive compute", description="Lunar birthday, ages and Kua profile")
    p.add_argument("--year", required=True)
    p.add_argument("--month", required=True)
    p.add_argument("--day", required=True)
    p.add_argument("--era", type=str.lower, choices=["ad", "roc"], default="ad", help="year given in AD or ROC (民國)")
    p.add_argument("--gender", default="", help="male | female")
    p.add_argument("--today", type=_parse_ymd, default=None, help="YYYY-MM-DD (default: system date)")
    p.add_argument("--oracle", default="chinese")
    p.add_argument("--json", action="store_true")
    args = p.parse_args(argv)

    try:
        inp = lunarfive.validate_input(args.year, args.month, args.day, args.gender, era=args.era)
    except lunarfive.ValidationError as e:
        return _print_outcome(ComputeOutcome(error=e.message, result=None), args.json)

    outcome = lunarfive.compute_result(inp, today=_today(args.today), oracle=args.oracle)
    return _print_outcome(outcome, args.json)


def cmd_query(argv: list[str]) -> int:
    import lunarfive

    p = argparse.ArgumentParser(prog="lunarfive query", description="Compute from a query string")
    p.add_argument("query", help="e.g. 'year=1990&month=5&day=20&gender=male'")
    p.add_argument("--today", type=_parse_ymd, default=None, help="YYYY-MM-DD (default: system date)")
    p.add_argument("--oracle", default="chinese")
    p.add_argument("--json", action="store_true")
    args = p.parse_args(argv)

    params = dict(parse_qsl(args.query.lstrip("?")))
    outcome = lunarfive.compute_query(params, today=_today(args.today), oracle=args.oracle)
    if not outcome.ok and not outcome.error:
        print("no query parameters given", file=sys.stderr)
    return _print_outcome(outcome, args.json)


def cmd_lunar(argv: list[str]) -> int:
    import lunarfive

    p = argparse.ArgumentParser(prog="lunarfive lunar", description="Gregorian -> lunar date")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--oracle", default="chinese")
    args = p.parse_args(argv)

    parts = lunarfive.lunar_info(args.date, oracle=args.oracle)
    print(f"{parts.display_text}（{parts.label()}） lunar_year={parts.lunar_year}")
    return 0


def cmd_birthday(argv: list[str]) -> int:
    import lunarfive

    p = argparse.ArgumentParser(prog="lunarfive birthday", description="This lunar year's birthday for a birth date")
    p.add_argument("date", type=_parse_ymd, help="birth date YYYY-MM-DD")
    p.add_argument("--today", type=_parse_ymd, default=None, help="YYYY-MM-DD (default: system date)")
    p.add_argument("--oracle", default="chinese")
    p.add_argument("--radius", type=_radius, default=220, help="search radius in days")
    args = p.parse_args(argv)

    resolved = lunarfive.resolve_birthday(
        args.date,
        _today(args.today),
        oracle=args.oracle,
        window=lunarfive.SearchWindow(args.radius),
    )
    print(resolved.date.isoformat() if resolved.found else "not found")
    if resolved.note:
        print(resolved.note)
    return 0


def cmd_kua(argv: list[str]) -> int:
    import lunarfive
    from lunarfive.engines.kua import kua_profile

    p = argparse.ArgumentParser(prog="lunarfive kua", description="Kua number for a Gregorian birth year")
    p.add_argument("year", type=int, help="Gregorian year")
    p.add_argument("--gender", required=True, choices=["male", "female"])
    args = p.parse_args(argv)

    k = lunarfive.kua(args.gender, args.year)
    profile = kua_profile(k.profile_key)
    print(f"ROC year      = {k.roc_year}")
    print(f"raw Kua       = {k.raw_number}")
    print(f"normalized    = {k.normalized_number}")
    print(f"element / gua = {profile.element} / {profile.gua}{profile.symbol}  {profile.type}")
    if k.note:
        print(k.note)
    return 0


def cmd_elements(argv: list[str]) -> int:
    import lunarfive
    from lunarfive.data.tables import ELEMENT_ORDER

    p = argparse.ArgumentParser(prog="lunarfive elements", description="Five-element relations table")
    p.parse_args(argv)

    print("     " + " ".join(f"{e:^4}" for e in ELEMENT_ORDER))
    for me in ELEMENT_ORDER:
        row = " ".join(f"{lunarfive.element_relation(me, other):^3}" for other in ELEMENT_ORDER)
        print(f"{me}:  {row}")
    print()
    for e in ELEMENT_ORDER:
        info = lunarfive.element_insight(e)
        print(f"{e} {info.title}  宜：{info.suitable_colors}  忌：{info.unsuitable_colors}")
    return 0


def cmd_transcripts(argv: list[str]) -> int:
    import lunarfive

    p = argparse.ArgumentParser(prog="lunarfive transcripts", description="Trigram profile transcripts")
    p.parse_args(argv)

    for number, profile in lunarfive.transcripts():
        print(f"{number}｜{profile.element}{profile.gua}{profile.symbol}｜{profile.type}")
        print(f"  {profile.transcript}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `lunarfive YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_lunar(argv)

    p = argparse.ArgumentParser(prog="lunarfive", description="Lunar birthday, age and Kua calculator.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("compute", help="Compute ages and Kua from year/month/day/gender")
    sub.add_parser("query", help="Compute from a query string")
    sub.add_parser("lunar", help="Gregorian -> lunar date")
    sub.add_parser("birthday", help="Locate this lunar year's birthday")
    sub.add_parser("kua", help="Kua number for a birth year and gender")
    sub.add_parser("elements", help="Five-element relations and insights")
    sub.add_parser("transcripts", help="Trigram profile transcripts")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "compute": cmd_compute,
        "query": cmd_query,
        "lunar": cmd_lunar,
        "birthday": cmd_birthday,
        "kua": cmd_kua,
        "elements": cmd_elements,
        "transcripts": cmd_transcripts,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
