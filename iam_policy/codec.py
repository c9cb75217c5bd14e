"""
iam_policy/codec.py — serializacja polityk do JSON i pomiar rozmiaru.

Format kompaktowy (bez białych znaków):
  - separators=(",", ":")
  - ensure_ascii=False  (znaki spoza ASCII zapisywane dosłownie)
  - allow_nan=False     (NaN/Infinity nie są poprawnym JSON)

Rozmiar polityki to długość formy kompaktowej — w znakach (domyślnie,
tak liczy limity IAM) albo w bajtach UTF-8.
"""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any

from .document import Policy


class SizeMetric(StrEnum):
    """Jednostka pomiaru rozmiaru zserializowanej polityki."""
    CHARS = "chars"
    BYTES = "bytes"


def dumps(policy: Policy, indent: int | None = None) -> str:
    """
    Serializuje politykę do JSON.

    Bez indent — forma kompaktowa, używana do pomiaru i jako wynik.
    Z indent — forma czytelna, wyłącznie do wyświetlania.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        policy.to_dict(),
        separators=separators,
        indent=indent,
        ensure_ascii=False,
        allow_nan=False,
    )


def dumps_value(value: Any) -> str:
    """Kompaktowy JSON dowolnej wartości (np. pojedynczej instrukcji)."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def measure(text: str, metric: SizeMetric = SizeMetric.CHARS) -> int:
    if metric is SizeMetric.BYTES:
        return len(text.encode("utf-8"))
    return len(text)


def serialized_size(policy: Policy, metric: SizeMetric = SizeMetric.CHARS) -> int:
    """Rozmiar kompaktowej formy JSON polityki."""
    return measure(dumps(policy), metric)


def loads(text: str | bytes) -> Any:
    """Parsuje JSON dokumentu wejściowego (bez walidacji struktury)."""
    if isinstance(text, bytes):
        text = text.decode("utf-8-sig")
    return json.loads(text)
