"""
splitter/service.py — pełny przebieg podziału dokumentu polityki.

split_policy(raw, max_chars) -> SplitResult

Kolejność:
  1. max_chars (domyślnie 6144) musi być > 0  → InvalidConfigurationError
  2. walidacja dokumentu (policy_validator)   → InvalidDocumentError
  3. pakowanie instrukcji (engine)
  4. serializacja polityk wynikowych, id "split-<n>-<max_chars>"

Przy błędzie nie jest zwracany żaden częściowy wynik.
"""

from __future__ import annotations

import logging
from typing import Any

from iam_policy import DEFAULT_MAX_CHARS, SizeMetric, dumps
from policy_validator import PolicyValidator, check_limit

from .engine import pack_bins
from .types import (
    InvalidConfigurationError,
    InvalidDocumentError,
    SerializationFailureError,
    SplitResult,
)

logger = logging.getLogger(__name__)


def split_id(statement_count: int, limit: int) -> str:
    return f"split-{statement_count}-{limit}"


def split_policy(
    raw: str | bytes | dict[str, Any],
    max_chars: int | None = None,
    *,
    metric: SizeMetric = SizeMetric.CHARS,
    validator: PolicyValidator | None = None,
) -> SplitResult:
    """
    Waliduje i dzieli dokument polityki.

    Args:
        raw:       tekst JSON polityki albo słownik po json.loads
        max_chars: limit rozmiaru jednej polityki (None → 6144)
        metric:    jednostka pomiaru rozmiaru (znaki / bajty UTF-8)
        validator: własny walidator (domyślnie PolicyValidator())
    """
    limit = DEFAULT_MAX_CHARS if max_chars is None else max_chars

    limit_errors = check_limit(limit)
    if limit_errors:
        raise InvalidConfigurationError(limit_errors[0].message, {"limit": limit})

    report = (validator or PolicyValidator()).validate(raw)
    if not report.is_valid or report.policy is None:
        first = report.errors[0] if report.errors else None
        message = first.message if first else "Niepoprawny dokument polityki."
        raise InvalidDocumentError(message, report=report)
    policy = report.policy

    logger.info(
        "Splitting policy with %d statements, max_chars=%d",
        len(policy.statements), limit,
    )

    bins = pack_bins(policy, limit, metric=metric)

    policies = [policy.with_statements(b.statements) for b in bins]
    documents: list[str] = []
    for i, p in enumerate(policies):
        try:
            documents.append(dumps(p))
        except (TypeError, ValueError) as exc:
            raise SerializationFailureError("output", i, exc) from exc

    logger.info("Successfully split policy into %d policies", len(policies))

    return SplitResult(
        id=split_id(len(policy.statements), limit),
        limit=limit,
        policies=policies,
        documents=documents,
        sizes=[b.size for b in bins],
        metric=metric,
        warnings=list(report.warnings),
    )
