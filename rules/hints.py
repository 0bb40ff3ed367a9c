# rules/hints.py
from __future__ import annotations

from typing import List, Tuple

from countries import Country, first_capital
from rules.scoring import MAX_HINTS


def format_population(population: int) -> str:
    if population >= 1_000_000_000:
        return f"{population / 1_000_000_000:.1f} billion"
    if population >= 1_000_000:
        return f"{population / 1_000_000:.1f} million"
    if population >= 1_000:
        return f"{population / 1_000:.0f} thousand"
    return str(population)


def currency_text(country: Country) -> str:
    currency = country.currency
    if currency is None or not (currency.name or currency.symbol):
        return "no currency information available"
    if currency.name and currency.symbol:
        return f"{currency.name} ({currency.symbol})"
    return currency.name or currency.symbol


def generate_hints(country: Country) -> Tuple[str, ...]:
    """
    Build the hints for one round, weakest first.

    Priority: region, population, currency, capital. When the region is
    missing the list is padded with the first letter of the official name,
    and failing that with the letter count of the common name.
    """
    hints: List[str] = []

    if country.region:
        region_hint = f"located in region: {country.region}"
        if country.subregion:
            region_hint += f" ({country.subregion})"
        hints.append(region_hint)

    hints.append(f"population of approximately {format_population(country.population)}")
    hints.append(f"currency: {currency_text(country)}")

    capital = first_capital(country)
    if capital:
        hints.append(f"capital: {capital}")

    official_added = False
    while len(hints) < MAX_HINTS:
        if country.official_name and not official_added:
            hints.append(f"official name starts with: {country.official_name[0]}")
            official_added = True
        else:
            hints.append(f"common name has {len(country.common_name)} letters")
            break

    return tuple(hints[:MAX_HINTS])
