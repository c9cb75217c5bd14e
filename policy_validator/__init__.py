"""
policy_validator — walidator dokumentów polityk IAM przed podziałem.

Interfejs publiczny:
    PolicyValidator  — główny walidator (etapy A–E)
    check_limit      — walidacja limitu max_chars
    normalize_policy — normalizacja dokumentu (Statement jako lista)
    ValidationReport, ValidationError, ErrorCode — typy raportu

Typowe użycie:
    from policy_validator import PolicyValidator

    report = PolicyValidator().validate(policy_text)
    if not report.is_valid:
        for e in report.errors:
            print(e.code, e.path, e.message)
"""

from .types import ErrorCode, ValidationError, ValidationReport
from .normalizer import normalize_policy
from .policy_validator import PolicyValidator, check_limit

__all__ = [
    "ErrorCode",
    "ValidationError",
    "ValidationReport",
    "normalize_policy",
    "PolicyValidator",
    "check_limit",
]
