from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    data_dir: Path
    catalog_path: Path


def get_project_root() -> Path:
    """
    Resolve repo root robustly.
    Assumes this file lives at: <root>/src/utils/config.py
    """
    return Path(__file__).resolve().parents[2]


def get_paths() -> ProjectPaths:
    root = get_project_root()
    data_dir = root / "data"
    return ProjectPaths(
        root=root,
        data_dir=data_dir,
        catalog_path=data_dir / "catalog.json",
    )


@dataclass(frozen=True)
class CatalogConfig:
    local_path: Path
    s3_uri: Optional[str]
    region: Optional[str]
    currency: str

    @property
    def s3_enabled(self) -> bool:
        return self.s3_uri is not None


def get_catalog_config() -> CatalogConfig:
    """
    Configure where the product catalog is read from.
    Local file by default; S3 only when CATALOG_S3_URI is set.

    Env:
      CATALOG_PATH   (default: <root>/data/catalog.json)
      CATALOG_S3_URI (optional, s3://bucket/key.json)
      AWS_REGION / AWS_DEFAULT_REGION (optional)
      CURRENCY       (default: USD, display only)
    """
    local = _env("CATALOG_PATH", None)
    return CatalogConfig(
        local_path=Path(local) if local else get_paths().catalog_path,
        s3_uri=_env("CATALOG_S3_URI", None),
        region=_env("AWS_REGION", None) or _env("AWS_DEFAULT_REGION", None),
        currency=_env("CURRENCY", "USD") or "USD",
    )
