"""
iam_policy — model i serializacja dokumentów polityk IAM.

Użycie:
  from iam_policy import Policy, dumps, serialized_size, SizeMetric

Moduły:
  document  — Policy, Statement
  codec     — dumps, dumps_value, loads, measure, serialized_size, SizeMetric
  constants — DEFAULT_MAX_CHARS, INLINE_MAX_CHARS, LIMIT_PRESETS, KNOWN_VERSIONS
"""

from .constants import (
    DEFAULT_MAX_CHARS,
    INLINE_MAX_CHARS,
    KNOWN_VERSIONS,
    LIMIT_PRESETS,
    VALID_EFFECTS,
)
from .document import Policy, Statement
from .codec import SizeMetric, dumps, dumps_value, loads, measure, serialized_size

__all__ = [
    "DEFAULT_MAX_CHARS",
    "INLINE_MAX_CHARS",
    "KNOWN_VERSIONS",
    "LIMIT_PRESETS",
    "VALID_EFFECTS",
    "Policy",
    "Statement",
    "SizeMetric",
    "dumps",
    "dumps_value",
    "loads",
    "measure",
    "serialized_size",
]
