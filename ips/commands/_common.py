"""Wspólne elementy komend: wczytywanie polityki, limit, tabela błędów walidacji."""

from __future__ import annotations

import argparse
import pathlib
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from iam_policy import LIMIT_PRESETS, SizeMetric
from policy_validator import ValidationReport

console = Console()


def read_policy_input(path_arg: str) -> bytes:
    """
    Czyta surowe bajty dokumentu polityki z pliku albo ze stdin ('-').

    Dekodowanie (UTF-8, BOM) robi walidator; błędne kodowanie trafia
    do raportu jako E_JSON_INVALID.
    """
    if path_arg == "-":
        return sys.stdin.buffer.read()

    path = pathlib.Path(path_arg)
    if not path.exists():
        console.print(f"[red]Brak pliku polityki:[/red] {path}")
        raise SystemExit(1)
    return path.read_bytes()


def resolve_limit(args: argparse.Namespace) -> int:
    """--max-chars > --preset > ustawienia (IPS_MAX_CHARS)."""
    if getattr(args, "max_chars", None) is not None:
        return args.max_chars
    if getattr(args, "preset", None):
        return LIMIT_PRESETS[args.preset]
    return args.settings.max_chars


def resolve_metric(args: argparse.Namespace) -> SizeMetric:
    if getattr(args, "metric", None):
        return SizeMetric(args.metric)
    return args.settings.metric


def add_limit_arguments(p: argparse.ArgumentParser) -> None:
    group = p.add_mutually_exclusive_group()
    group.add_argument(
        "--max-chars", "-n",
        type=int,
        default=None,
        metavar="N",
        help="Maksymalny rozmiar jednej polityki (domyślnie IPS_MAX_CHARS lub 6144).",
    )
    group.add_argument(
        "--preset",
        choices=sorted(LIMIT_PRESETS),
        help="Limit AWS: managed (6144) lub inline (2048).",
    )
    p.add_argument(
        "--metric",
        choices=[m.value for m in SizeMetric],
        default=None,
        help="Jednostka rozmiaru: chars (znaki) lub bytes (bajty UTF-8).",
    )


def print_report_errors(report: ValidationReport) -> None:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Kod",      style="yellow", no_wrap=True)
    table.add_column("Ścieżka", style="cyan",   no_wrap=True)
    table.add_column("Komunikat")
    table.add_column("Poprawka", style="dim")

    for e in report.errors:
        table.add_row(e.code, escape(e.path), escape(e.message), escape(e.expected_fix))

    console.print(table)


def print_warnings(warnings: list[str]) -> None:
    if not warnings:
        return
    console.print("[yellow]Ostrzeżenia:[/yellow]")
    for w in warnings:
        console.print(f"  [yellow]·[/yellow] {escape(w)}")


def plural_policies(n: int) -> str:
    if n == 1:
        return "polityka"
    if 2 <= n % 10 <= 4 and n % 100 not in range(12, 15):
        return "polityki"
    return "polityk"
