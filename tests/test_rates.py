from unittest.mock import Mock

from src.pricing.models import CoverageLevel, SelectedOptions
from src.pricing.rates import (
    calculate_commuter_price,
    calculate_ltd_price,
    calculate_vol_life_price,
    calculate_vol_life_price_per_role,
)


def test_vol_life_price_per_role_single_employee(vol_life_product, single_election):
    price = calculate_vol_life_price_per_role("ee", single_election.coverage_level, vol_life_product.costs)
    assert price == 43.75


def test_vol_life_price_per_role_employee_with_spouse(vol_life_product, spouse_election):
    price = calculate_vol_life_price_per_role("ee", spouse_election.coverage_level, vol_life_product.costs)
    assert price == 70


def test_vol_life_price_single_employee(vol_life_product, single_election):
    per_role = Mock(wraps=calculate_vol_life_price_per_role)

    price = calculate_vol_life_price(vol_life_product, single_election, per_role=per_role)

    assert price == 43.75
    assert per_role.call_count == 1


def test_vol_life_price_employee_with_spouse(vol_life_product, spouse_election):
    per_role = Mock(wraps=calculate_vol_life_price_per_role)

    price = calculate_vol_life_price(vol_life_product, spouse_election, per_role=per_role)

    assert price == 79
    assert per_role.call_count == 2
    assert [c.args[0] for c in per_role.call_args_list] == ["ee", "sp"]


def test_vol_life_price_sums_coverage_levels_not_family_members(vol_life_product, spouse_election):
    options = SelectedOptions(
        family_members_to_cover=("ee",),
        coverage_level=spouse_election.coverage_level,
    )
    assert calculate_vol_life_price(vol_life_product, options) == 79


def test_ltd_price_for_employee(ltd_product, employee, single_election):
    assert calculate_ltd_price(ltd_product, employee, single_election) == 32.04


def test_ltd_price_without_employee_election(ltd_product, employee):
    options = SelectedOptions(family_members_to_cover=("sp",))
    assert calculate_ltd_price(ltd_product, employee, options) == 0


def test_commuter_price_train(commuter_product, employee):
    assert calculate_commuter_price(commuter_product, employee, SelectedOptions(benefit="train")) == 9.75


def test_commuter_price_parking(commuter_product, employee):
    assert calculate_commuter_price(commuter_product, employee, SelectedOptions(benefit="parking")) == 175


def test_vol_life_price_per_role_is_linear_in_coverage(vol_life_product):
    single = (CoverageLevel(role="ee", coverage=125000),)
    doubled = (CoverageLevel(role="ee", coverage=250000),)

    assert calculate_vol_life_price_per_role("ee", single, vol_life_product.costs) == 43.75
    assert calculate_vol_life_price_per_role("ee", doubled, vol_life_product.costs) == 87.5


def test_vol_life_price_equals_sum_of_roles(vol_life_product, spouse_election):
    levels = spouse_election.coverage_level
    per_role = [calculate_vol_life_price_per_role(c.role, levels, vol_life_product.costs) for c in levels]

    assert per_role == [70, 9]
    assert sum(per_role) == calculate_vol_life_price(vol_life_product, spouse_election) == 79
