"""
Product pricing and quote generation.

Provides:
- dispatch from product type to its rate calculator
- employer contribution applied to the raw price
- truncation to cents
- quote output object

Notes:
- Collaborators are passed in as a PricingCalculators bundle so callers (and
  tests) can substitute instrumented versions.
- Commuter products compute the employer contribution but return the full
  face price; voluntary life and LTD return the price net of contribution.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Optional

from src.pricing.contribution import get_employer_contribution
from src.pricing.formatting import format_price
from src.pricing.models import (
    CommuterProduct,
    EmployerContribution,
    Employee,
    LongTermDisabilityProduct,
    Product,
    SelectedOptions,
    VoluntaryLifeProduct,
)
from src.pricing.rates import (
    calculate_commuter_price,
    calculate_ltd_price,
    calculate_vol_life_price,
)


class UnknownProductTypeError(ValueError):
    def __init__(self, product_type: Any) -> None:
        self.product_type = product_type
        super().__init__(f"Unknown product type: {product_type}")


@dataclass(frozen=True)
class PricingCalculators:
    vol_life: Callable[[VoluntaryLifeProduct, SelectedOptions], float] = calculate_vol_life_price
    ltd: Callable[[LongTermDisabilityProduct, Employee, SelectedOptions], float] = calculate_ltd_price
    commuter: Callable[[CommuterProduct, Employee, SelectedOptions], float] = calculate_commuter_price
    employer_contribution: Callable[[EmployerContribution, float], float] = get_employer_contribution
    format_price: Callable[[float], float] = format_price


DEFAULT_CALCULATORS = PricingCalculators()


@dataclass(frozen=True)
class QuoteResult:
    product_type: str
    raw_price: float
    employer_contribution: float
    price: float
    notes: list[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def generate_quote(
    product: Product,
    employee: Employee,
    selected_options: SelectedOptions,
    calculators: Optional[PricingCalculators] = None,
) -> QuoteResult:
    """
    Price one product for one employee.

    raw          = rate calculator for product.type
    contribution = employer contribution on raw
    price        = format(raw - contribution)   (voluntary life, LTD)
                   format(raw)                  (commuter)
    """
    calc = calculators or DEFAULT_CALCULATORS

    if isinstance(product, VoluntaryLifeProduct):
        raw = calc.vol_life(product, selected_options)
    elif isinstance(product, LongTermDisabilityProduct):
        raw = calc.ltd(product, employee, selected_options)
    elif isinstance(product, CommuterProduct):
        raw = calc.commuter(product, employee, selected_options)
    else:
        raise UnknownProductTypeError(getattr(product, "type", product))

    contribution = calc.employer_contribution(product.employer_contribution, raw)

    if isinstance(product, CommuterProduct):
        price = calc.format_price(raw)
        notes = ["Commuter benefits are quoted at full price; employer contribution not deducted."]
    else:
        price = calc.format_price(raw - contribution)
        notes = ["Employer contribution deducted from raw price."]
        if not raw:
            notes.append("No covered members elected; employer contribution deducted uncapped.")

    return QuoteResult(
        product_type=product.type,
        raw_price=float(raw),
        employer_contribution=float(contribution),
        price=float(price),
        notes=notes,
    )


def calculate_product_price(
    product: Product,
    employee: Employee,
    selected_options: SelectedOptions,
    calculators: Optional[PricingCalculators] = None,
) -> float:
    """
    Final, user-visible price for a product.

    Raises UnknownProductTypeError for unrecognised product types.
    """
    return generate_quote(product, employee, selected_options, calculators=calculators).price
