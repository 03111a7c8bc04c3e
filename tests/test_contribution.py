from src.pricing.contribution import get_employer_contribution
from src.pricing.models import ContributionMode, EmployerContribution


def test_percentage_mode_scales_with_price(vol_life_product):
    assert get_employer_contribution(vol_life_product.employer_contribution, 39.37) == 3.937


def test_dollars_mode_ignores_price(commuter_product):
    assert get_employer_contribution(commuter_product.employer_contribution, 39.37) == 75
    assert get_employer_contribution(commuter_product.employer_contribution, 0) == 75


def test_dollars_mode_is_not_capped_at_price():
    cfg = EmployerContribution(mode=ContributionMode.DOLLARS, value=50)
    assert get_employer_contribution(cfg, 20) == 50
