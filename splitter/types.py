"""
splitter/types.py — typy danych i błędy silnika pakowania.

WeightedStatement — instrukcja z kosztem solo (koperta + ta jedna instrukcja).
PolicyBin         — kosz: instrukcje jednej polityki wynikowej + bieżący rozmiar.
SplitResult       — wynik podziału: polityki w kolejności tworzenia koszy.

Błędy (SplitError i podklasy) niosą rodzaj z taksonomii ErrorKind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from iam_policy import Policy, Statement, SizeMetric

if TYPE_CHECKING:
    from policy_validator import ValidationReport


class ErrorKind(StrEnum):
    """Rodzaje błędów podziału polityki."""
    INVALID_DOCUMENT      = "InvalidDocument"
    INVALID_CONFIGURATION = "InvalidConfiguration"
    ELEMENT_TOO_LARGE     = "ElementTooLarge"
    SERIALIZATION_FAILURE = "SerializationFailure"


# ---------------------------------------------------------------------------
# Błędy
# ---------------------------------------------------------------------------

class SplitError(Exception):
    """Bazowy błąd podziału; kind określa kategorię, details — dane dodatkowe."""

    kind: ErrorKind

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidDocumentError(SplitError):
    kind = ErrorKind.INVALID_DOCUMENT

    def __init__(
        self,
        message: str,
        report: "ValidationReport | None" = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.report = report


class InvalidConfigurationError(SplitError):
    kind = ErrorKind.INVALID_CONFIGURATION


class ElementTooLargeError(SplitError):
    """Pojedyncza instrukcja nie mieści się w limicie nawet sama."""

    kind = ErrorKind.ELEMENT_TOO_LARGE

    def __init__(self, index: int, size: int, limit: int) -> None:
        super().__init__(
            f"Instrukcja {index} (rozmiar {size}) przekracza limit ({limit}). "
            f"Pojedynczych instrukcji nie da się dzielić dalej.",
            {"index": index, "size": size, "limit": limit},
        )
        self.index = index
        self.size = size
        self.limit = limit


class SerializationFailureError(SplitError):
    """Błąd wewnętrzny: nie udało się zserializować instrukcji lub kosza."""

    kind = ErrorKind.SERIALIZATION_FAILURE

    def __init__(self, stage: str, index: int, cause: Exception) -> None:
        super().__init__(
            f"Nie udało się zserializować ({stage}) {index}: {cause}",
            {"stage": stage, "index": index},
        )
        self.stage = stage
        self.index = index


# ---------------------------------------------------------------------------
# Dane pakowania
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class WeightedStatement:
    """
    Instrukcja z kosztem.

    - index:     pozycja instrukcji w dokumencie wejściowym (0-based)
    - statement: instrukcja (nieprzezroczysta, niezmieniana)
    - size:      rozmiar koperty z tą jedną instrukcją
    """
    index: int
    statement: Statement
    size: int


@dataclass(slots=True)
class PolicyBin:
    """Kosz: instrukcje w kolejności dołożenia i zmierzony rozmiar całości."""
    statements: list[Statement] = field(default_factory=list)
    size: int = 0


@dataclass(slots=True)
class SplitResult:
    """
    Wynik podziału polityki.

    - id:        identyfikator "split-<liczba instrukcji>-<limit>"
    - limit:     zastosowany limit rozmiaru
    - policies:  polityki wynikowe w kolejności tworzenia koszy
    - documents: kompaktowe JSON tych polityk (ta sama kolejność)
    - sizes:     zmierzone rozmiary polityk (ta sama kolejność)
    - metric:    jednostka pomiaru
    - warnings:  ostrzeżenia walidatora dokumentu wejściowego
    """
    id: str
    limit: int
    policies: list[Policy]
    documents: list[str]
    sizes: list[int]
    metric: SizeMetric = SizeMetric.CHARS
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Odpowiedź w kształcie wyjścia CLI (--json-output)."""
        return {
            "id": self.id,
            "max_chars": self.limit,
            "split_policies": list(self.documents),
        }
