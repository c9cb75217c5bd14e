"""
splitter — podział polityk IAM na polityki mieszczące się w limicie rozmiaru.

Publiczne API:
  split_policy(raw, max_chars)            → SplitResult (walidacja + pakowanie)
  pack_statements(policy, limit)          → list[Policy] (sam silnik)
  pack_bins(policy, limit)                → list[PolicyBin]
  weigh_statements(policy)                → list[WeightedStatement]
  packing_order(weighted)                 → kolejność pakowania (malejąco, stabilnie)
  SplitError, InvalidDocumentError, InvalidConfigurationError,
  ElementTooLargeError, SerializationFailureError, ErrorKind   błędy
"""

from .engine import (
    check_statement_sizes,
    pack_bins,
    pack_statements,
    pack_weighted,
    packing_order,
    weigh_statements,
)
from .service import split_id, split_policy
from .types import (
    ElementTooLargeError,
    ErrorKind,
    InvalidConfigurationError,
    InvalidDocumentError,
    PolicyBin,
    SerializationFailureError,
    SplitError,
    SplitResult,
    WeightedStatement,
)

__all__ = [
    "check_statement_sizes",
    "pack_bins",
    "pack_statements",
    "pack_weighted",
    "packing_order",
    "weigh_statements",
    "split_id",
    "split_policy",
    "ElementTooLargeError",
    "ErrorKind",
    "InvalidConfigurationError",
    "InvalidDocumentError",
    "PolicyBin",
    "SerializationFailureError",
    "SplitError",
    "SplitResult",
    "WeightedStatement",
]
