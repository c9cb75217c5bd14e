"""
policy_validator/schema.py — JSON Schema (Draft 2020-12) koperty polityki IAM.

Schemat sprawdza wyłącznie kształt: typy pól Version / Id / Statement.
"Id": null oznacza brak Id (pole pomijane w politykach wynikowych).
Obecność Version i niepustość Statement sprawdzają dalsze etapy walidatora,
żeby zgłosić je dedykowanymi kodami błędów.
"""

from __future__ import annotations

from typing import Any

POLICY_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "iam-policy-envelope",
    "type": "object",
    "properties": {
        "Version": {"type": "string"},
        "Id": {"type": ["string", "null"]},
        "Statement": {
            "oneOf": [
                {"$ref": "#/$defs/Statement"},
                {"type": "array", "items": {"$ref": "#/$defs/Statement"}},
            ]
        },
    },
    "$defs": {
        # Treść instrukcji jest nieprzezroczysta; wymagany jest tylko obiekt.
        "Statement": {"type": "object"},
    },
}
