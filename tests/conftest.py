"""Pytest fixtures for benefit product pricing tests."""

import pytest

from src.pricing.models import (
    CommuterProduct,
    ContributionMode,
    CoverageLevel,
    EmployerContribution,
    Employee,
    LongTermDisabilityProduct,
    SelectedOptions,
    UnitRate,
    VoluntaryLifeProduct,
)


@pytest.fixture
def vol_life_product():
    return VoluntaryLifeProduct(
        name="Voluntary Life",
        employer_contribution=EmployerContribution(mode=ContributionMode.PERCENTAGE, value=0.1),
        costs={
            "ee": UnitRate(price=0.35, cost_divisor=1000),
            "sp": UnitRate(price=0.12, cost_divisor=1000),
            "ch": UnitRate(price=0.05, cost_divisor=1000),
        },
    )


@pytest.fixture
def ltd_product():
    return LongTermDisabilityProduct(
        name="Long Term Disability",
        employer_contribution=EmployerContribution(mode=ContributionMode.DOLLARS, value=10),
        coverage_percentage=60,
        costs={"ee": UnitRate(price=0.06, cost_divisor=100)},
    )


@pytest.fixture
def commuter_product():
    return CommuterProduct(
        name="Commuter Benefits",
        employer_contribution=EmployerContribution(mode=ContributionMode.DOLLARS, value=75),
        costs={"train": 9.75, "parking": 175},
    )


@pytest.fixture
def employee():
    return Employee(salary=89000, id="emp-001", first_name="Jordan", last_name="Lee")


@pytest.fixture
def single_election():
    return SelectedOptions(
        family_members_to_cover=("ee",),
        coverage_level=(CoverageLevel(role="ee", coverage=125000),),
    )


@pytest.fixture
def spouse_election():
    return SelectedOptions(
        family_members_to_cover=("ee", "sp"),
        coverage_level=(
            CoverageLevel(role="ee", coverage=200000),
            CoverageLevel(role="sp", coverage=75000),
        ),
    )
