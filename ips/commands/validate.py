"""Komenda: ips validate — waliduje dokument polityki IAM przed podziałem."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys

from policy_validator import PolicyValidator, check_limit

from ._common import console, print_report_errors, print_warnings, read_policy_input


def run(args: argparse.Namespace) -> None:
    raw    = read_policy_input(args.policy)
    report = PolicyValidator().validate(raw)

    # Limit sprawdzamy tylko gdy podany jawnie.
    if args.max_chars is not None:
        limit_errors = check_limit(args.max_chars)
        if limit_errors:
            report.errors.extend(limit_errors)
            report.is_valid = False
            report.policy = None

    if args.json_output:
        out: dict = {
            "is_valid": report.is_valid,
            "errors": [dataclasses.asdict(e) for e in report.errors],
            "warnings": report.warnings,
        }
        if report.policy is not None:
            out["statement_count"] = len(report.policy.statements)
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        if report.is_valid:
            n = len(report.policy.statements) if report.policy else 0
            console.print(f"[green]OK[/green]  Polityka jest poprawna ({n} instrukcji).")
        else:
            console.print(f"[red]BŁĄD[/red]  Polityka — {len(report.errors)} błąd(ów).")
            print_report_errors(report)
        print_warnings(report.warnings)

    if not report.is_valid:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Waliduje dokument polityki IAM (JSON).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Waliduje plik JSON z polityką IAM (etapy A–E):

  A  Parsowanie JSON
  B  JSON Schema           (typy pól Version / Id / Statement)
  C  Koperta               (Version obecne, znane wersje)
  D  Instrukcje            (co najmniej jedna; Effect — ostrzeżenia)
  E  Serializacja          (każda instrukcja zapisywalna jako JSON)

Przykłady:
  ips validate polityka.json
  ips validate polityka.json --max-chars 2048
  ips validate polityka.json --json-output
        """,
    )
    p.add_argument(
        "policy",
        metavar="PLIK_POLITYKI",
        help="Ścieżka do pliku JSON z polityką IAM ('-' czyta ze stdin).",
    )
    p.add_argument(
        "--max-chars", "-n",
        type=int,
        default=None,
        metavar="N",
        help="Sprawdź także poprawność limitu rozmiaru.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport walidacji jako JSON na stdout.",
    )
    p.set_defaults(func=run)
