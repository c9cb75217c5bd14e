"""
iam_policy/document.py — model dokumentu polityki IAM.

Policy składa się z koperty (Version, opcjonalne Id) i sekwencji
instrukcji Statement. Koperta jest kopiowana dosłownie do każdej polityki
wynikowej; zmienia się tylko lista instrukcji.

Instrukcja (Statement) jest dla splittera nieprzezroczysta — to dowolny
obiekt JSON, którego zawartość nie jest ani interpretowana, ani zmieniana.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, TypeAlias

# Pojedyncza instrukcja polityki, np. {"Effect": "Allow", "Action": [...], ...}
Statement: TypeAlias = dict[str, Any]


@dataclass(slots=True)
class Policy:
    """
    Dokument polityki IAM.

    - version:    pole Version koperty, np. "2012-10-17"
    - statements: instrukcje w kolejności dokumentu
    - id:         opcjonalne pole Id koperty (pomijane w JSON gdy None)
    """
    version: str
    statements: list[Statement] = field(default_factory=list)
    id: str | None = None

    def with_statements(self, statements: Iterable[Statement]) -> "Policy":
        """Zwraca kopię koperty z inną listą instrukcji."""
        return Policy(version=self.version, statements=list(statements), id=self.id)

    def to_dict(self) -> dict[str, Any]:
        """Słownik w kolejności kluczy JSON: Version, Statement, Id."""
        out: dict[str, Any] = {
            "Version":   self.version,
            "Statement": list(self.statements),
        }
        if self.id is not None:
            out["Id"] = self.id
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Policy":
        """
        Buduje Policy ze słownika (po json.loads i normalizacji).

        Nie waliduje struktury — tym zajmuje się policy_validator.
        """
        statements = raw.get("Statement") or []
        if isinstance(statements, dict):
            statements = [statements]
        return cls(
            version=raw.get("Version", ""),
            statements=list(statements),
            id=raw.get("Id"),
        )
