"""
policy_validator/types.py — kody błędów i struktury raportu walidacji.

ValidationError  — pojedynczy błąd z kodem, ścieżką JSON Pointer,
    komunikatem i instrukcją naprawy.
ValidationReport — wynik walidacji: is_valid, errors, warnings,
    opcjonalnie sparsowana polityka.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from iam_policy import Policy


class ErrorCode(StrEnum):
    """Stałe kody błędów walidatora (etapy A–E oraz konfiguracja)."""

    # A: parsowanie JSON
    JSON_INVALID                = "E_JSON_INVALID"

    # B: JSON Schema
    SCHEMA_VIOLATION            = "E_SCHEMA_VIOLATION"

    # C: koperta
    VERSION_MISSING             = "E_VERSION_MISSING"

    # D: instrukcje
    STATEMENT_EMPTY             = "E_STATEMENT_EMPTY"

    # E: serializacja
    STATEMENT_NOT_SERIALIZABLE  = "E_STATEMENT_NOT_SERIALIZABLE"

    # konfiguracja
    LIMIT_NOT_POSITIVE          = "E_LIMIT_NOT_POSITIVE"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:         stały identyfikator klasy błędu (ErrorCode)
    - path:         JSON Pointer do miejsca błędu, np. "/Statement/3"
    - message:      czytelny opis błędu
    - expected_fix: krótka instrukcja naprawy
    - details:      opcjonalny słownik z dodatkowymi danymi
    """

    code: ErrorCode
    path: str
    message: str
    expected_fix: str
    details: dict[str, Any] | None = None


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik pełnej walidacji dokumentu polityki.

    - is_valid: True gdy brak błędów (warnings nie wpływają)
    - errors:   lista błędów (ValidationError)
    - warnings: lista komunikatów ostrzegawczych (str)
    - policy:   sparsowana polityka (None gdy walidacja nie przeszła)
    """

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    policy: Policy | None = None
