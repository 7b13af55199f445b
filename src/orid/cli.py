"""Command-line interface for orid.

Line-oriented, like a Unix filter:
- `generate` builds one ORID from flags
- `parse` reads ORIDs from stdin or a file and writes one JSON object per line
- `validate` reads ORIDs and reports each one as true/false
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Iterable, Iterator, TextIO

from .errors import OridError
from .records import OridRecord
from .v1 import generate, is_valid, parse

logger = logging.getLogger(__name__)


def _read_lines(path: str | None) -> TextIO:
    if path is None or path == "-":
        return sys.stdin
    return open(path, "r", encoding="utf-8")


def _orids(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        raw = line.rstrip("\r\n")
        if raw.strip():
            yield raw


def _cmd_generate(args: argparse.Namespace) -> int:
    record = OridRecord(
        provider=args.provider,
        custom1=args.custom1,
        custom2=args.custom2,
        custom3=args.custom3,
        service=args.service,
        resource_id=args.resource_id,
        resource_rider=args.resource_rider,
        use_slash_separator=args.slash,
    )
    sys.stdout.write(generate(record) + "\n")
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    with _read_lines(args.path) as fh:
        out = [json.dumps(parse(orid).as_dict()) for orid in _orids(fh)]
    for line in out:
        sys.stdout.write(line + "\n")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    status = 0
    out: list[str] = []
    with _read_lines(args.path) as fh:
        for orid in _orids(fh):
            ok = is_valid(orid)
            if not ok:
                logger.debug("invalid orid: %r", orid)
                status = 1
            out.append(f"{orid}\t{'true' if ok else 'false'}")
    for line in out:
        sys.stdout.write(line + "\n")
    return status


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="orid", description="Generate, parse and validate ORIDs.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Build an ORID from its fields")
    g.add_argument("--provider", required=True)
    g.add_argument("--custom1")
    g.add_argument("--custom2")
    g.add_argument("--custom3")
    g.add_argument("--service", required=True)
    g.add_argument("--resource-id", required=True)
    g.add_argument("--resource-rider")
    g.add_argument("--slash", action="store_true", help="Separate the rider with '/' instead of ':'")
    g.set_defaults(func=_cmd_generate)

    for name, func, help_text in (
        ("parse", _cmd_parse, "Parse ORIDs into JSON objects, one per line"),
        ("validate", _cmd_validate, "Check ORIDs, one per line"),
    ):
        s = sub.add_parser(name, help=help_text)
        s.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
        s.set_defaults(func=func)

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s - %(message)s",
    )

    try:
        return args.func(args)
    except (OridError, OSError, UnicodeDecodeError) as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
