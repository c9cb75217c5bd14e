"""
policy_validator/normalizer.py — normalizacja dokumentu przed walidacją.

normalize_policy():
  - Zwraca głęboką kopię dokumentu.
  - Pojedynczą instrukcję zapisaną jako obiekt ("Statement": {...})
    zamienia na listę jednoelementową.
  - Nie zmienia treści instrukcji ani kolejności ich kluczy.
"""

from __future__ import annotations

import copy
from typing import Any


def normalize_policy(doc: dict[str, Any]) -> dict[str, Any]:
    doc = copy.deepcopy(doc)

    statements = doc.get("Statement")
    if isinstance(statements, dict):
        doc["Statement"] = [statements]

    return doc
