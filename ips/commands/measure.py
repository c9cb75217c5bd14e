"""Komenda: ips measure — koszt solo każdej instrukcji w kolejności pakowania."""

from __future__ import annotations

import argparse

from rich import box
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from policy_validator import PolicyValidator, check_limit
from splitter import SplitError, packing_order, weigh_statements

from ._common import (
    add_limit_arguments,
    console,
    print_report_errors,
    read_policy_input,
    resolve_limit,
    resolve_metric,
)


def run(args: argparse.Namespace) -> None:
    raw    = read_policy_input(args.policy)
    limit  = resolve_limit(args)
    metric = resolve_metric(args)

    limit_errors = check_limit(limit)
    if limit_errors:
        console.print(f"[red]InvalidConfiguration:[/red] {escape(limit_errors[0].message)}")
        raise SystemExit(1)

    report = PolicyValidator().validate(raw)
    if not report.is_valid or report.policy is None:
        console.print("[red]Niepoprawna polityka.[/red]")
        print_report_errors(report)
        raise SystemExit(1)

    try:
        weighted = weigh_statements(report.policy, metric=metric)
    except SplitError as exc:
        console.print(f"[red]{exc.kind}:[/red] {escape(exc.message)}")
        raise SystemExit(1)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
    )
    table.add_column("KOLEJNOŚĆ", no_wrap=True, justify="right")
    table.add_column("INDEKS",    no_wrap=True, justify="right")
    table.add_column("SID",       no_wrap=True, max_width=40)
    table.add_column("ROZMIAR",   no_wrap=True, justify="right", style="bold")
    table.add_column("STATUS",    no_wrap=True)

    too_large = 0
    for pos, ws in enumerate(packing_order(weighted), start=1):
        if ws.size > limit:
            too_large += 1
            status = Text("ZA DUŻA", style="red")
        else:
            status = Text("OK", style="green")
        table.add_row(
            str(pos),
            str(ws.index),
            escape(str(ws.statement.get("Sid", "—"))),
            str(ws.size),
            status,
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]limit {limit} ({metric}) · {len(weighted)} instrukcji[/dim]\n")

    if too_large:
        console.print(
            f"[red]{too_large} instrukcja(e) przekracza(ją) limit sama(e) — "
            f"podział nie jest możliwy.[/red]"
        )
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "measure",
        help="Pokazuje koszt solo każdej instrukcji (koperta + instrukcja).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Liczy koszt solo każdej instrukcji — rozmiar polityki zawierającej kopertę
i tylko tę jedną instrukcję — i wypisuje instrukcje w kolejności, w jakiej
ips split próbuje je układać (malejąco po koszcie).

Przykłady:
  ips measure polityka.json
  ips measure polityka.json --preset inline --metric bytes
        """,
    )
    p.add_argument(
        "policy",
        metavar="PLIK_POLITYKI",
        help="Ścieżka do pliku JSON z polityką IAM ('-' czyta ze stdin).",
    )
    add_limit_arguments(p)
    p.set_defaults(func=run)
