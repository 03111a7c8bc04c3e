"""
Pricing data model.

Products are immutable rate configurations; employees and their elections are
supplied by the caller for each pricing request. Nothing here is mutated by the
pricing engine.

Product variants form a closed set discriminated by `.type`:
- VoluntaryLifeProduct: per-role rate per unit of elected coverage
- LongTermDisabilityProduct: rate against a share of the employee's salary
- CommuterProduct: flat monthly price per benefit kind
- UnknownProduct: fallback for records whose type is not recognised
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple, Union


class ProductType(str, Enum):
    VOLUNTARY_LIFE = "voluntaryLife"
    LONG_TERM_DISABILITY = "longTermDisability"
    COMMUTER = "commuter"


class ContributionMode(str, Enum):
    PERCENTAGE = "percentage"
    DOLLARS = "dollars"


@dataclass(frozen=True)
class EmployerContribution:
    # percentage: value is a fraction of the raw price (0.10 = 10%)
    # dollars   : value is a flat amount
    mode: ContributionMode
    value: float


@dataclass(frozen=True)
class UnitRate:
    """Premium `price` charged per `cost_divisor` of coverage."""

    price: float
    cost_divisor: float = 1000


@dataclass(frozen=True)
class VoluntaryLifeProduct:
    name: str
    employer_contribution: EmployerContribution
    costs: Mapping[str, UnitRate]
    type: str = field(default=ProductType.VOLUNTARY_LIFE.value, init=False)


@dataclass(frozen=True)
class LongTermDisabilityProduct:
    name: str
    employer_contribution: EmployerContribution
    # Share of salary insured, in percent (60 = 60%)
    coverage_percentage: float
    costs: Mapping[str, UnitRate]
    type: str = field(default=ProductType.LONG_TERM_DISABILITY.value, init=False)


@dataclass(frozen=True)
class CommuterProduct:
    name: str
    employer_contribution: EmployerContribution
    # benefit kind (train, parking) -> flat monthly price
    costs: Mapping[str, float]
    type: str = field(default=ProductType.COMMUTER.value, init=False)


@dataclass(frozen=True)
class UnknownProduct:
    type: str
    name: Optional[str] = None


Product = Union[VoluntaryLifeProduct, LongTermDisabilityProduct, CommuterProduct, UnknownProduct]


@dataclass(frozen=True)
class Employee:
    salary: float
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


@dataclass(frozen=True)
class CoverageLevel:
    role: str
    coverage: float


@dataclass(frozen=True)
class SelectedOptions:
    family_members_to_cover: Tuple[str, ...] = ()
    coverage_level: Tuple[CoverageLevel, ...] = ()
    benefit: Optional[str] = None
