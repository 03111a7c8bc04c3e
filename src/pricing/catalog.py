"""
Product catalog decoding.

Catalog files are JSON with camelCase records:

{
  "products":  {"<key>": {"type": ..., "name": ..., "employerContribution": {...}, "costs": ...}},
  "employees": {"<key>": {"salary": ..., "firstName": ..., ...}}
}

Records with an unrecognised product type decode to UnknownProduct; the
dispatcher raises UnknownProductTypeError when asked to price one.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from src.pricing.models import (
    CommuterProduct,
    ContributionMode,
    CoverageLevel,
    EmployerContribution,
    Employee,
    LongTermDisabilityProduct,
    Product,
    ProductType,
    SelectedOptions,
    UnitRate,
    UnknownProduct,
    VoluntaryLifeProduct,
)
from src.utils.io import read_json


@dataclass(frozen=True)
class ProductCatalog:
    products: Dict[str, Product]
    employees: Dict[str, Employee]


def _contribution_from_dict(record: Mapping[str, Any]) -> EmployerContribution:
    return EmployerContribution(
        mode=ContributionMode(record["mode"]),
        value=float(record["value"]),
    )


def _unit_rates_from_dict(costs: Mapping[str, Any]) -> Dict[str, UnitRate]:
    rates: Dict[str, UnitRate] = {}
    for role, rate in costs.items():
        rates[role] = UnitRate(
            price=float(rate["price"]),
            cost_divisor=float(rate.get("costDivisor", 1000)),
        )
    return rates


def product_from_dict(record: Mapping[str, Any]) -> Product:
    ptype = record.get("type")
    name = record.get("name")

    if ptype == ProductType.VOLUNTARY_LIFE.value:
        return VoluntaryLifeProduct(
            name=str(name),
            employer_contribution=_contribution_from_dict(record["employerContribution"]),
            costs=_unit_rates_from_dict(record["costs"]),
        )
    if ptype == ProductType.LONG_TERM_DISABILITY.value:
        return LongTermDisabilityProduct(
            name=str(name),
            employer_contribution=_contribution_from_dict(record["employerContribution"]),
            coverage_percentage=float(record["coveragePercentage"]),
            costs=_unit_rates_from_dict(record["costs"]),
        )
    if ptype == ProductType.COMMUTER.value:
        return CommuterProduct(
            name=str(name),
            employer_contribution=_contribution_from_dict(record["employerContribution"]),
            costs={benefit: float(price) for benefit, price in record["costs"].items()},
        )
    return UnknownProduct(type=str(ptype), name=name)


def employee_from_dict(record: Mapping[str, Any]) -> Employee:
    return Employee(
        salary=float(record.get("salary", 0)),
        id=record.get("id"),
        first_name=record.get("firstName"),
        last_name=record.get("lastName"),
    )


def selected_options_from_dict(record: Mapping[str, Any]) -> SelectedOptions:
    levels = tuple(
        CoverageLevel(role=str(c["role"]), coverage=float(c["coverage"]))
        for c in record.get("coverageLevel", [])
    )
    return SelectedOptions(
        family_members_to_cover=tuple(record.get("familyMembersToCover", [])),
        coverage_level=levels,
        benefit=record.get("benefit"),
    )


def load_catalog(path: Union[str, Path]) -> ProductCatalog:
    obj = read_json(path)
    products = {k: product_from_dict(v) for k, v in obj.get("products", {}).items()}
    employees = {k: employee_from_dict(v) for k, v in obj.get("employees", {}).items()}
    return ProductCatalog(products=products, employees=employees)
