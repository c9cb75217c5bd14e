"""
policy_validator/policy_validator.py — walidator dokumentów polityk IAM.

PolicyValidator.validate(raw) -> ValidationReport

Etapy:
  A — parsowanie JSON      (tylko dla wejścia tekstowego)
  B — JSON Schema          (kształt koperty, jsonschema Draft 2020-12)
  C — koperta              (Version obecne i niepuste, znane wersje)
  D — instrukcje           (co najmniej jedna; Effect — tylko ostrzeżenia)
  E — serializacja         (każda instrukcja musi dać się zapisać jako JSON w UTF-8)

Etapy A i B są fail-fast: przy błędach nie ma sensu iść dalej.
"""

from __future__ import annotations

import json
from typing import Any

import jsonschema

from iam_policy import KNOWN_VERSIONS, VALID_EFFECTS, Policy, dumps_value, loads

from .normalizer import normalize_policy
from .schema import POLICY_SCHEMA
from .types import ErrorCode, ValidationError, ValidationReport


def check_limit(limit: Any) -> list[ValidationError]:
    """Sprawdza limit rozmiaru; zwraca listę błędów (pustą gdy poprawny)."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        return [ValidationError(
            code=ErrorCode.LIMIT_NOT_POSITIVE,
            path="max_chars",
            message=f"max_chars musi być dodatnią liczbą całkowitą (podano {limit!r}).",
            expected_fix="Podaj max_chars > 0, np. 6144 (managed) lub 2048 (inline).",
            details={"max_chars": limit},
        )]
    return []


class PolicyValidator:
    """
    Walidator dokumentu polityki IAM.

    Użycie:
        validator = PolicyValidator()
        report    = validator.validate(policy_text)
        if report.is_valid:
            policy = report.policy
    """

    def __init__(self, schema: dict[str, Any] | None = None) -> None:
        self._schema = POLICY_SCHEMA if schema is None else schema
        self._schema_validator = jsonschema.Draft202012Validator(self._schema)

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def validate(self, raw: str | bytes | dict[str, Any]) -> ValidationReport:
        """
        Waliduje dokument i zwraca ValidationReport.

        Args:
            raw: tekst JSON polityki albo słownik po json.loads
        """
        errors: list[ValidationError] = []
        warnings: list[str] = []

        # A: JSON
        if isinstance(raw, (str, bytes)):
            doc = self._stage_json(raw, errors)
            if errors:
                return ValidationReport(is_valid=False, errors=errors, warnings=warnings)
        else:
            doc = raw

        # B: JSON Schema
        self._stage_schema(doc, errors)
        if errors:
            return ValidationReport(is_valid=False, errors=errors, warnings=warnings)

        doc = normalize_policy(doc)

        # C: koperta
        self._stage_envelope(doc, errors, warnings)

        # D: instrukcje
        self._stage_statements(doc, errors, warnings)

        # E: serializacja
        self._stage_serialization(doc, errors)

        is_valid = len(errors) == 0
        return ValidationReport(
            is_valid=is_valid,
            errors=errors,
            warnings=warnings,
            policy=Policy.from_dict(doc) if is_valid else None,
        )

    # ------------------------------------------------------------------
    # Stage A: JSON
    # ------------------------------------------------------------------

    def _stage_json(self, raw: str | bytes, errors: list[ValidationError]) -> Any:
        try:
            return loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
            errors.append(ValidationError(
                code=ErrorCode.JSON_INVALID,
                path="/",
                message=f"Nie udało się sparsować JSON polityki: {exc}",
                expected_fix="Popraw składnię JSON dokumentu polityki.",
            ))
            return None

    # ------------------------------------------------------------------
    # Stage B: JSON Schema
    # ------------------------------------------------------------------

    def _stage_schema(self, doc: Any, errors: list[ValidationError]) -> None:
        for e in self._schema_validator.iter_errors(doc):
            path = (
                "/" + "/".join(str(p) for p in e.absolute_path)
                if e.absolute_path
                else "/"
            )
            errors.append(ValidationError(
                code=ErrorCode.SCHEMA_VIOLATION,
                path=path,
                message=e.message,
                expected_fix=f"Popraw naruszenie schematu JSON na ścieżce {path}.",
            ))

    # ------------------------------------------------------------------
    # Stage C: koperta
    # ------------------------------------------------------------------

    def _stage_envelope(
        self,
        doc: dict[str, Any],
        errors: list[ValidationError],
        warnings: list[str],
    ) -> None:
        version = doc.get("Version")
        if not version:
            errors.append(ValidationError(
                code=ErrorCode.VERSION_MISSING,
                path="/Version",
                message="Polityka musi mieć pole Version.",
                expected_fix=f'Dodaj "Version": "{KNOWN_VERSIONS[0]}".',
            ))
        elif version not in KNOWN_VERSIONS:
            warnings.append(
                f"Nieznana wersja polityki '{version}' "
                f"(znane: {', '.join(KNOWN_VERSIONS)})."
            )

    # ------------------------------------------------------------------
    # Stage D: instrukcje
    # ------------------------------------------------------------------

    def _stage_statements(
        self,
        doc: dict[str, Any],
        errors: list[ValidationError],
        warnings: list[str],
    ) -> None:
        statements = doc.get("Statement") or []
        if not statements:
            errors.append(ValidationError(
                code=ErrorCode.STATEMENT_EMPTY,
                path="/Statement",
                message="Polityka musi mieć co najmniej jedną instrukcję Statement.",
                expected_fix="Dodaj co najmniej jeden obiekt do listy Statement.",
            ))
            return

        for i, stmt in enumerate(statements):
            effect = stmt.get("Effect")
            if effect is None:
                warnings.append(f"Statement[{i}] nie ma pola Effect.")
            elif effect not in VALID_EFFECTS:
                warnings.append(
                    f"Statement[{i}] ma nieznany Effect '{effect}' "
                    f"(oczekiwano Allow lub Deny)."
                )

    # ------------------------------------------------------------------
    # Stage E: serializacja
    # ------------------------------------------------------------------

    def _stage_serialization(self, doc: dict[str, Any], errors: list[ValidationError]) -> None:
        for i, stmt in enumerate(doc.get("Statement") or []):
            try:
                # encode: samotne surogaty przechodzą przez json, ale nie przez UTF-8
                dumps_value(stmt).encode("utf-8")
            except (TypeError, ValueError) as exc:
                errors.append(ValidationError(
                    code=ErrorCode.STATEMENT_NOT_SERIALIZABLE,
                    path=f"/Statement/{i}",
                    message=f"Instrukcji {i} nie da się zapisać jako JSON: {exc}",
                    expected_fix="Usuń z instrukcji wartości spoza typów JSON (np. NaN, zbiory, samotne surogaty Unicode).",
                    details={"index": i},
                ))
