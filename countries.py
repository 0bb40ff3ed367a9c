# countries.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Tuple

import requests

from utils import safe_first, text_or_none

logger = logging.getLogger(__name__)


RESTCOUNTRIES_URL = os.environ.get(
    "RESTCOUNTRIES_URL",
    "https://restcountries.com/v3.1/all"
    "?fields=name,capital,population,currencies,region,subregion",
)
FETCH_TIMEOUT_SECONDS = float(os.environ.get("RESTCOUNTRIES_TIMEOUT", "12"))


# =========================
# Models
# =========================

@dataclass(frozen=True)
class Currency:
    name: Optional[str] = None
    symbol: Optional[str] = None


@dataclass(frozen=True)
class Country:
    common_name: str
    official_name: Optional[str]
    capitals: Tuple[str, ...]
    population: int
    currency: Optional[Currency] = None
    region: Optional[str] = None
    subregion: Optional[str] = None


class FailureKind(Enum):
    NETWORK = "network"
    MALFORMED_PAYLOAD = "malformed_payload"
    NO_PLAYABLE_COUNTRIES = "no_playable_countries"


@dataclass(frozen=True)
class LoadResult:
    countries: Tuple[Country, ...] = ()
    failure: Optional[FailureKind] = None
    detail: str = ""
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return self.failure is None and bool(self.countries)

    @classmethod
    def failed(cls, kind: FailureKind, detail: str, skipped: int = 0) -> "LoadResult":
        return cls(countries=(), failure=kind, detail=detail, skipped=skipped)


# =========================
# Fetch
# =========================

def fetch_countries(url: str = RESTCOUNTRIES_URL, timeout: float = FETCH_TIMEOUT_SECONDS):
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.json()


# =========================
# Deserialize / admission
# =========================

def is_playable(country: Country) -> bool:
    """A country can be played only with a name, a capital and people living there."""
    return (
        bool(country.common_name)
        and bool(country.capitals)
        and country.population > 0
    )


def _parse_currency(raw: Any) -> Optional[Currency]:
    # currencies dict is like {"EUR": {"name": "Euro", "symbol": "€"}, ...}
    if not isinstance(raw, dict) or not raw:
        return None
    info = next(iter(raw.values())) or {}
    if not isinstance(info, dict):
        return None
    return Currency(name=text_or_none(info.get("name")), symbol=text_or_none(info.get("symbol")))


def parse_country(raw: Any) -> Optional[Country]:
    """
    Build a Country from one RestCountries v3.1 record.

    Returns None when the record is not usable (missing common name, no capital,
    population missing or not positive). Callers skip those silently.
    """
    if not isinstance(raw, dict):
        return None

    names = raw.get("name") or {}
    if not isinstance(names, dict):
        return None

    capitals_raw = raw.get("capital") or []
    if not isinstance(capitals_raw, list):
        capitals_raw = []
    capitals = tuple(c for c in (text_or_none(x) for x in capitals_raw) if c)

    population = raw.get("population")
    # bool is an int subclass; a "true" population is junk
    if not isinstance(population, int) or isinstance(population, bool):
        return None

    country = Country(
        common_name=text_or_none(names.get("common")) or "",
        official_name=text_or_none(names.get("official")),
        capitals=capitals,
        population=population,
        currency=_parse_currency(raw.get("currencies")),
        region=text_or_none(raw.get("region")),
        subregion=text_or_none(raw.get("subregion")),
    )
    return country if is_playable(country) else None


def load_countries(fetch: Callable[[], Any] = fetch_countries) -> LoadResult:
    """
    Fetch and filter the playable pool.

    Never raises for data problems: network errors, bad payloads and an empty
    pool all come back as a failed LoadResult so the caller decides what to show.
    """
    try:
        payload = fetch()
    except requests.exceptions.JSONDecodeError as e:
        logger.warning(f"RestCountries returned a body that is not JSON: {e}")
        return LoadResult.failed(FailureKind.MALFORMED_PAYLOAD, str(e))
    except requests.RequestException as e:
        logger.warning(f"RestCountries request failed: {e}")
        return LoadResult.failed(FailureKind.NETWORK, str(e))
    except ValueError as e:
        logger.warning(f"RestCountries payload could not be decoded: {e}")
        return LoadResult.failed(FailureKind.MALFORMED_PAYLOAD, str(e))

    if not isinstance(payload, list):
        logger.warning(f"Unexpected RestCountries payload type: {type(payload).__name__}")
        return LoadResult.failed(FailureKind.MALFORMED_PAYLOAD, "expected a list of countries")

    countries = []
    skipped = 0
    for raw in payload:
        country = parse_country(raw)
        if country is None:
            skipped += 1
            continue
        countries.append(country)

    if skipped:
        logger.info(f"Skipped {skipped} incomplete country records")

    if not countries:
        return LoadResult.failed(
            FailureKind.NO_PLAYABLE_COUNTRIES,
            "no country record had a name, a capital and a population",
            skipped=skipped,
        )

    logger.info(f"Loaded {len(countries)} playable countries")
    return LoadResult(countries=tuple(countries), skipped=skipped)


def first_capital(country: Country) -> Optional[str]:
    return safe_first(country.capitals)
