"""
ips — narzędzie CLI do dzielenia polityk IAM.

Użycie:
  ips [--log-level POZIOM] <komenda> [opcje]

Komendy:
  split     Dzieli politykę na polityki mieszczące się w limicie rozmiaru.
  validate  Waliduje dokument polityki (JSON, schemat, koperta, instrukcje).
  measure   Pokazuje koszt solo każdej instrukcji w kolejności pakowania.

Konfiguracja (zmienne środowiskowe lub plik .env):
  IPS_MAX_CHARS    domyślny limit rozmiaru (6144)
  IPS_SIZE_METRIC  chars | bytes (chars)
  IPS_LOG_LEVEL    DEBUG | INFO | WARNING | ERROR (WARNING)
"""

from __future__ import annotations

import argparse
import sys

from ips import __version__
from ips._config import load_settings
from ips._logging import LOG_LEVELS, setup_logging
from ips.commands import measure as cmd_measure
from ips.commands import split as cmd_split
from ips.commands import validate as cmd_validate
from ips.commands._common import console


def _force_utf8() -> None:
    # Windows: terminal może używać cp1252, wymuszamy UTF-8, żeby polskie znaki
    # w tekstach pomocy argparse były wypisywane poprawnie.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ips",
        description="ips — podział polityk IAM na polityki mieszczące się w limicie rozmiaru.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"ips {__version__}"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Poziom logowania na stderr (domyślnie IPS_LOG_LEVEL lub WARNING).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_split.add_parser(subparsers)
    cmd_validate.add_parser(subparsers)
    cmd_measure.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        _force_utf8()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        console.print(f"[red]Błąd konfiguracji:[/red] {exc}")
        raise SystemExit(1)

    setup_logging(args.log_level or settings.log_level)
    args.settings = settings
    args.func(args)


if __name__ == "__main__":
    main()
