"""Konfiguracja ips — zmienne środowiskowe, opcjonalnie plik .env w katalogu projektu."""

from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from iam_policy import DEFAULT_MAX_CHARS, SizeMetric

ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Ustawienia domyślne komend (opcje linii poleceń mają pierwszeństwo).

    - max_chars: IPS_MAX_CHARS   (domyślnie 6144)
    - metric:    IPS_SIZE_METRIC (chars | bytes, domyślnie chars)
    - log_level: IPS_LOG_LEVEL   (domyślnie WARNING)
    """
    max_chars: int = DEFAULT_MAX_CHARS
    metric: SizeMetric = SizeMetric.CHARS
    log_level: str = "WARNING"


def load_settings(env_file: pathlib.Path | None = ENV_FILE) -> Settings:
    """Wczytuje ustawienia; zmienne już obecne w środowisku wygrywają z .env."""
    if env_file is not None:
        load_dotenv(env_file, override=False)

    raw_max = os.getenv("IPS_MAX_CHARS", str(DEFAULT_MAX_CHARS))
    try:
        max_chars = int(raw_max)
    except ValueError as exc:
        raise ValueError(f"IPS_MAX_CHARS musi być liczbą całkowitą (podano {raw_max!r}).") from exc

    raw_metric = os.getenv("IPS_SIZE_METRIC", SizeMetric.CHARS).lower()
    try:
        metric = SizeMetric(raw_metric)
    except ValueError as exc:
        allowed = ", ".join(m.value for m in SizeMetric)
        raise ValueError(f"IPS_SIZE_METRIC musi być jednym z: {allowed} (podano {raw_metric!r}).") from exc

    log_level = os.getenv("IPS_LOG_LEVEL", "WARNING").upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ValueError(f"IPS_LOG_LEVEL: nieznany poziom logowania {log_level!r}.")

    return Settings(max_chars=max_chars, metric=metric, log_level=log_level)
