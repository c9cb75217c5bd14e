"""
Stałe limitów i wersji polityk IAM.

Limity AWS liczone są w znakach dokumentu JSON:
  managed — polityka zarządzana (customer managed policy), 6144 znaki
  inline  — polityka inline użytkownika, 2048 znaków
"""

from __future__ import annotations

DEFAULT_MAX_CHARS = 6144
INLINE_MAX_CHARS  = 2048

LIMIT_PRESETS: dict[str, int] = {
    "managed": DEFAULT_MAX_CHARS,
    "inline":  INLINE_MAX_CHARS,
}

# Wersje języka polityk akceptowane przez IAM (najnowsza pierwsza).
KNOWN_VERSIONS: tuple[str, ...] = ("2012-10-17", "2008-10-17")

VALID_EFFECTS: frozenset[str] = frozenset({"Allow", "Deny"})
