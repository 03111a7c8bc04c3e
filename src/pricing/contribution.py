from __future__ import annotations

from src.pricing.models import ContributionMode, EmployerContribution


def get_employer_contribution(config: EmployerContribution, raw_price: float) -> float:
    """
    Amount the employer covers toward a product's raw price.

    - percentage: raw_price * value
    - dollars   : value, independent of raw_price (not capped)
    """
    if config.mode == ContributionMode.PERCENTAGE:
        return raw_price * config.value
    return config.value
