"""
Per-product rate calculators.

Each calculator turns elections and a product's rate table into a raw,
unformatted monthly price. Employer contribution and truncation are applied
by the dispatcher in src.pricing.quote.
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

from src.pricing.models import (
    CommuterProduct,
    CoverageLevel,
    Employee,
    LongTermDisabilityProduct,
    SelectedOptions,
    UnitRate,
    VoluntaryLifeProduct,
)

EMPLOYEE_ROLE = "ee"


def calculate_vol_life_price_per_role(
    role: str,
    coverage_level: Sequence[CoverageLevel],
    costs: Mapping[str, UnitRate],
) -> float:
    """
    Raw price for one covered person:

    price = (elected coverage / cost_divisor) * rate
    """
    coverage = next(c.coverage for c in coverage_level if c.role == role)
    rate = costs[role]
    return (coverage / rate.cost_divisor) * rate.price


def calculate_vol_life_price(
    product: VoluntaryLifeProduct,
    selected_options: SelectedOptions,
    per_role: Callable[[str, Sequence[CoverageLevel], Mapping[str, UnitRate]], float] = calculate_vol_life_price_per_role,
) -> float:
    """
    Sum of per-role prices over every elected coverage level.
    """
    price = 0.0
    for level in selected_options.coverage_level:
        price += per_role(level.role, selected_options.coverage_level, product.costs)
    return price


def calculate_ltd_price(
    product: LongTermDisabilityProduct,
    employee: Employee,
    selected_options: SelectedOptions,
) -> float:
    """
    Long-term disability covers the employee only.

    covered = salary * coverage_percentage / 100
    price   = (covered / cost_divisor) * rate
    """
    if EMPLOYEE_ROLE not in selected_options.family_members_to_cover:
        return 0.0

    covered = employee.salary * product.coverage_percentage / 100
    rate = product.costs[EMPLOYEE_ROLE]
    return (covered / rate.cost_divisor) * rate.price


def calculate_commuter_price(
    product: CommuterProduct,
    employee: Employee,
    selected_options: SelectedOptions,
) -> float:
    # Flat price per benefit kind; employee attributes do not affect it.
    return product.costs[selected_options.benefit]
