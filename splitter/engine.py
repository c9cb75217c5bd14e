"""
splitter/engine.py — silnik pakowania instrukcji polityki (first-fit decreasing).

Algorytm:
  1. Koszt solo każdej instrukcji: rozmiar koperty z tą jedną instrukcją.
     Instrukcja droższa niż limit → ElementTooLargeError.
  2. Sortowanie malejąco po koszcie solo; remisy w kolejności wejściowej.
  3. Dla każdej instrukcji: pierwszy kosz (w kolejności utworzenia), w którym
     koperta + instrukcje kosza + nowa instrukcja mieści się w limicie.
     Brak takiego kosza → nowy kosz z tą instrukcją.
  4. Każdy kosz → Policy z tą samą kopertą, instrukcje w kolejności dołożenia.

Koszt NIE jest addytywny: serializacja dokłada separatory, nawiasy i kopertę
raz na dokument. Każda próba dołożenia mierzy więc pełną serializację
kandydata; rozmiar kosza trzymany jest tylko jako wynik ostatniego pomiaru.

Silnik jest czystą funkcją: bez I/O, bez stanu między wywołaniami.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

from iam_policy import Policy, SizeMetric, serialized_size

from .types import (
    ElementTooLargeError,
    InvalidConfigurationError,
    InvalidDocumentError,
    PolicyBin,
    SerializationFailureError,
    WeightedStatement,
)

logger = logging.getLogger(__name__)

# Funkcja kosztu: rozmiar zserializowanej polityki.
CostFn: TypeAlias = Callable[[Policy], int]


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def _default_cost(metric: SizeMetric) -> CostFn:
    return functools.partial(serialized_size, metric=metric)


def _measure(cost: CostFn, policy: Policy, stage: str, index: int) -> int:
    try:
        return cost(policy)
    except (TypeError, ValueError) as exc:
        raise SerializationFailureError(stage, index, exc) from exc


def _check_inputs(policy: Policy, limit: int) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidConfigurationError(
            f"max_chars musi być większe od 0 (podano {limit!r}).",
            {"limit": limit},
        )
    if not policy.statements:
        raise InvalidDocumentError("Polityka musi mieć co najmniej jedną instrukcję Statement.")


# ---------------------------------------------------------------------------
# Koszt solo
# ---------------------------------------------------------------------------

def weigh_statements(
    policy: Policy,
    *,
    metric: SizeMetric = SizeMetric.CHARS,
    cost: CostFn | None = None,
) -> list[WeightedStatement]:
    """Zwraca instrukcje z kosztem solo, w kolejności wejściowej."""
    cost = cost or _default_cost(metric)
    weighted: list[WeightedStatement] = []
    for i, stmt in enumerate(policy.statements):
        size = _measure(cost, policy.with_statements([stmt]), "statement", i)
        logger.debug("Statement %d size: %d", i, size)
        weighted.append(WeightedStatement(index=i, statement=stmt, size=size))
    return weighted


def check_statement_sizes(weighted: Sequence[WeightedStatement], limit: int) -> None:
    """Zgłasza pierwszą (w kolejności wejściowej) instrukcję większą niż limit."""
    for ws in weighted:
        if ws.size > limit:
            raise ElementTooLargeError(ws.index, ws.size, limit)


# ---------------------------------------------------------------------------
# Pakowanie
# ---------------------------------------------------------------------------

def packing_order(weighted: Sequence[WeightedStatement]) -> list[WeightedStatement]:
    """Malejąco po koszcie solo; remisy w kolejności wejściowej."""
    return sorted(weighted, key=lambda ws: (-ws.size, ws.index))


def pack_weighted(
    envelope: Policy,
    weighted: Sequence[WeightedStatement],
    limit: int,
    *,
    metric: SizeMetric = SizeMetric.CHARS,
    cost: CostFn | None = None,
) -> list[PolicyBin]:
    """
    First-fit decreasing po koszcie solo.

    Args:
        envelope: polityka, z której brana jest koperta (Version, Id)
        weighted: instrukcje z kosztem solo (wynik weigh_statements)
        limit:    maksymalny rozmiar jednej polityki wynikowej

    Returns:
        kosze w kolejności utworzenia
    """
    cost = cost or _default_cost(metric)

    bins: list[PolicyBin] = []
    for ws in packing_order(weighted):
        for bin_index, b in enumerate(bins):
            candidate = envelope.with_statements([*b.statements, ws.statement])
            size = _measure(cost, candidate, "bin", bin_index)
            if size <= limit:
                b.statements.append(ws.statement)
                b.size = size
                break
        else:
            bins.append(PolicyBin(statements=[ws.statement], size=ws.size))

    for i, b in enumerate(bins, start=1):
        logger.debug("Policy %d: %d statements, %d %s", i, len(b.statements), b.size, metric)

    return bins


def pack_bins(
    policy: Policy,
    limit: int,
    *,
    metric: SizeMetric = SizeMetric.CHARS,
    cost: CostFn | None = None,
) -> list[PolicyBin]:
    """Liczy koszty solo, sprawdza limit i pakuje instrukcje do koszy."""
    _check_inputs(policy, limit)
    cost = cost or _default_cost(metric)

    weighted = weigh_statements(policy, cost=cost)
    check_statement_sizes(weighted, limit)
    return pack_weighted(policy, weighted, limit, metric=metric, cost=cost)


def pack_statements(
    policy: Policy,
    limit: int,
    *,
    metric: SizeMetric = SizeMetric.CHARS,
    cost: CostFn | None = None,
) -> list[Policy]:
    """
    Dzieli politykę na listę polityk o rozmiarze <= limit.

    Każda instrukcja trafia do dokładnie jednej polityki wynikowej; każda
    polityka wynikowa ma kopertę polityki wejściowej.

    Raises:
        InvalidConfigurationError: limit <= 0
        InvalidDocumentError:      brak instrukcji
        ElementTooLargeError:      instrukcja nie mieści się w limicie sama
        SerializationFailureError: instrukcji lub kosza nie da się zserializować
    """
    bins = pack_bins(policy, limit, metric=metric, cost=cost)
    return [policy.with_statements(b.statements) for b in bins]
