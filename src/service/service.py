"""
Quote service for the Benefits Quote Engine.

Single source of truth:
- catalog (local file or S3) -> product + employee records
- raw request dicts -> typed elections -> pricing -> quote
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from src.pricing.catalog import (
    ProductCatalog,
    employee_from_dict,
    load_catalog,
    selected_options_from_dict,
)
from src.pricing.models import Employee, SelectedOptions
from src.pricing.quote import PricingCalculators, generate_quote
from src.service.schemas import QuoteResponse
from src.utils.catalog_store import ensure_catalog_downloaded
from src.utils.config import get_catalog_config


# In-process cache (useful for FastAPI startup + AWS Lambda warm invocations)
_CACHED_CATALOG: Optional[ProductCatalog] = None


def get_catalog(path: Optional[Union[str, Path]] = None, force_reload: bool = False) -> ProductCatalog:
    """
    Load and cache the product catalog.

    If path is not provided:
      - Use CATALOG_PATH (default: data/catalog.json)
      - If CATALOG_S3_URI is set and the local file is missing, download it first
    """
    global _CACHED_CATALOG
    if force_reload or _CACHED_CATALOG is None:
        if path:
            resolved = Path(path)
        else:
            cfg = get_catalog_config()
            resolved = cfg.local_path
            if cfg.s3_enabled:
                resolved = ensure_catalog_downloaded(
                    catalog_s3_uri=str(cfg.s3_uri),
                    local_path=cfg.local_path,
                    aws_region=cfg.region,
                )
        _CACHED_CATALOG = load_catalog(resolved)
    return _CACHED_CATALOG


def quote_for_product(
    product_key: str,
    employee: Employee,
    selected_options: SelectedOptions,
    *,
    catalog: Optional[ProductCatalog] = None,
    calculators: Optional[PricingCalculators] = None,
) -> QuoteResponse:
    """
    Price a catalog product for one employee.
    Raises KeyError for unknown product keys and UnknownProductTypeError for
    catalog records with an unrecognised type.
    """
    cat = catalog or get_catalog()
    if product_key not in cat.products:
        raise KeyError(f"Unknown product: {product_key}")

    product = cat.products[product_key]
    q = generate_quote(product, employee, selected_options, calculators=calculators)

    return QuoteResponse(
        product_key=product_key,
        product_name=str(product.name),
        currency=get_catalog_config().currency,
        quote=q.to_dict(),
    )


def quote_from_request_dict(
    product_key: str,
    employee: Mapping[str, Any],
    selected_options: Mapping[str, Any],
    *,
    catalog: Optional[ProductCatalog] = None,
) -> Dict[str, Any]:
    """
    Convenience: decode camelCase request dicts and return a JSON-ready dict.
    """
    resp = quote_for_product(
        product_key,
        employee_from_dict(employee),
        selected_options_from_dict(selected_options),
        catalog=catalog,
    )
    return resp.to_dict()
