from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from src.utils.io import s3_download_file


def ensure_catalog_downloaded(*, catalog_s3_uri: str, local_path: Path, aws_region: Optional[str] = None) -> Path:
    """
    Ensure the catalog exists at local_path. If not, download from S3.
    Returns local_path.
    """
    lp = Path(local_path)
    if lp.exists() and lp.stat().st_size > 0:
        return lp

    p = urlparse(catalog_s3_uri)
    if p.scheme != "s3":
        raise ValueError(f"CATALOG_S3_URI must be s3://..., got: {catalog_s3_uri}")

    s3_download_file(p.netloc, p.path.lstrip("/"), lp, region=aws_region)
    return lp
