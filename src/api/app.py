"""
FastAPI service for the Benefits Quote Engine (thin API wrapper).

Endpoints:
- GET  /health
- GET  /products -> catalog product keys and types
- POST /quote    -> per-employee price for one product

The API layer stays thin:
- validates input
- calls src.service.service
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from src.pricing.models import CoverageLevel, Employee, SelectedOptions
from src.pricing.quote import UnknownProductTypeError
from src.service.service import get_catalog, quote_for_product


app = FastAPI(title="Benefits Quote Engine", version="0.1.0")


@app.on_event("startup")
def _startup() -> None:
    get_catalog()  # caches product catalog


# -----------------------------
# Schemas
# -----------------------------
class EmployeeInput(BaseModel):
    salary: float = 0.0
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class CoverageLevelInput(BaseModel):
    role: str
    coverage: float


class SelectedOptionsInput(BaseModel):
    family_members_to_cover: List[str] = Field(default_factory=list)
    coverage_level: List[CoverageLevelInput] = Field(default_factory=list)
    benefit: Optional[str] = None


class QuoteRequest(BaseModel):
    product: str
    employee: EmployeeInput = Field(default_factory=EmployeeInput)
    selected_options: SelectedOptionsInput = Field(default_factory=SelectedOptionsInput)


class QuoteBreakdown(BaseModel):
    product_type: str
    raw_price: float
    employer_contribution: float
    price: float
    notes: list[str] = Field(default_factory=list)


class QuoteResponse(BaseModel):
    product_key: str
    product_name: str
    currency: str
    quote: QuoteBreakdown


# -----------------------------
# Routes
# -----------------------------
@app.get("/health")
def health() -> Dict[str, Any]:
    cat = get_catalog()
    return {"status": "ok", "products": len(cat.products)}


@app.get("/products")
def products() -> Dict[str, str]:
    cat = get_catalog()
    return {key: p.type for key, p in cat.products.items()}


@app.post("/quote", response_model=QuoteResponse)
def quote(req: QuoteRequest) -> QuoteResponse:
    employee = Employee(**req.employee.model_dump())
    options = SelectedOptions(
        family_members_to_cover=tuple(req.selected_options.family_members_to_cover),
        coverage_level=tuple(
            CoverageLevel(role=c.role, coverage=c.coverage) for c in req.selected_options.coverage_level
        ),
        benefit=req.selected_options.benefit,
    )

    try:
        out = quote_for_product(req.product, employee, options)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=f"Unknown product: {req.product}") from e
    except UnknownProductTypeError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return QuoteResponse(**out.to_dict())
