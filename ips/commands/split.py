"""Komenda: ips split — dzieli politykę IAM na polityki mieszczące się w limicie."""

from __future__ import annotations

import argparse
import json
import pathlib

from rich import box
from rich.markup import escape
from rich.table import Table

from iam_policy import dumps
from splitter import InvalidDocumentError, SplitError, SplitResult, split_policy

from ._common import (
    add_limit_arguments,
    console,
    plural_policies,
    print_report_errors,
    print_warnings,
    read_policy_input,
    resolve_limit,
    resolve_metric,
)


# ---------------------------------------------------------------------------
# Wyjście
# ---------------------------------------------------------------------------

def _write_out_dir(result: SplitResult, out_dir: pathlib.Path, pretty: bool) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    for i, (policy, document) in enumerate(zip(result.policies, result.documents), start=1):
        path = out_dir / f"policy-{i}.json"
        text = dumps(policy, indent=2) if pretty else document
        path.write_text(text + "\n", encoding="utf-8")


def _fmt_sids(statements: list[dict]) -> str:
    sids = [escape(str(s.get("Sid", "—"))) for s in statements]
    return ", ".join(sids)


def _print_table(result: SplitResult) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
    )
    table.add_column("#",          no_wrap=True, justify="right")
    table.add_column("INSTRUKCJE", no_wrap=True, justify="right")
    table.add_column("ROZMIAR",    no_wrap=True, justify="right", style="bold")
    table.add_column("SID")

    for i, (policy, size) in enumerate(zip(result.policies, result.sizes), start=1):
        table.add_row(
            str(i),
            str(len(policy.statements)),
            f"{size}/{result.limit}",
            _fmt_sids(policy.statements),
        )

    total = len(result.policies)
    console.print()
    console.print(table)
    console.print(f"  [dim]{result.id} · {total} {plural_policies(total)} ({result.metric})[/dim]\n")


# ---------------------------------------------------------------------------
# Komenda
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    raw    = read_policy_input(args.policy)
    limit  = resolve_limit(args)
    metric = resolve_metric(args)

    try:
        result = split_policy(raw, limit, metric=metric)
    except InvalidDocumentError as exc:
        console.print(f"[red]Niepoprawna polityka:[/red] {escape(exc.message)}")
        if exc.report is not None:
            print_report_errors(exc.report)
        raise SystemExit(1)
    except SplitError as exc:
        console.print(f"[red]{exc.kind}:[/red] {escape(exc.message)}")
        raise SystemExit(1)

    if args.out_dir:
        _write_out_dir(result, pathlib.Path(args.out_dir), args.pretty)

    # Tryb JSON: na stdout wyłącznie dokument JSON.
    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    _print_table(result)
    if args.out_dir:
        total = len(result.policies)
        console.print(f"[green]Zapisano:[/green] {args.out_dir}  ({total} {plural_policies(total)})")
    print_warnings(result.warnings)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "split",
        help="Dzieli politykę IAM na polityki mieszczące się w limicie rozmiaru.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dzieli politykę IAM po instrukcjach (Statement) i układa je w jak najmniejszą
liczbę polityk, z których każda mieści się w limicie rozmiaru.
Pojedyncza instrukcja nigdy nie jest dzielona.

Limity AWS: 6144 znaki (managed), 2048 znaków (inline).

Przykłady:
  ips split polityka.json
  ips split polityka.json --max-chars 2048
  ips split polityka.json --preset inline --out-dir podzielone/
  cat polityka.json | ips split - --json-output
        """,
    )
    p.add_argument(
        "policy",
        metavar="PLIK_POLITYKI",
        help="Ścieżka do pliku JSON z polityką IAM ('-' czyta ze stdin).",
    )
    add_limit_arguments(p)
    p.add_argument(
        "--out-dir", "-o",
        metavar="KATALOG",
        help="Zapisz polityki wynikowe jako policy-<n>.json w katalogu.",
    )
    p.add_argument(
        "--pretty",
        action="store_true",
        help="Zapisuj pliki w --out-dir z wcięciami (rozmiar liczony bez nich).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz wynik jako JSON na stdout (id, max_chars, split_policies).",
    )
    p.set_defaults(func=run)
