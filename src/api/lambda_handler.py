"""
Lambda entrypoint for the benefits quote API.

API Gateway events are passed through Mangum to the FastAPI app. The product
catalog is loaded once per container, at import, so warm invocations price
against the cached catalog. PRELOAD_CATALOG=false defers the load to the
first request; CATALOG_S3_URI points the load at S3 instead of the bundled
data/catalog.json.
"""

from __future__ import annotations

import os

from mangum import Mangum

from src.api.app import app
from src.service.service import get_catalog


_PRELOAD_CATALOG = os.getenv("PRELOAD_CATALOG", "true").lower() in {"1", "true", "yes"}

if _PRELOAD_CATALOG:
    get_catalog()


handler = Mangum(app)
