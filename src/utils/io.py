from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_json(path: Union[str, Path]) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suf = path.suffix.lower()
    if suf != ".json":
        raise ValueError(f"Unsupported catalog format: {suf}")

    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


# ---------------------------
# Optional S3 support
# ---------------------------
def _boto3_client(service: str, region: Optional[str] = None):
    try:
        import boto3  # type: ignore
    except ImportError as e:
        raise ImportError(
            "boto3 is required for S3 operations. Install with: pip install boto3"
        ) from e
    return boto3.client(service, region_name=region)


def s3_download_file(
    bucket: str, key: str, local_path: Path, region: Optional[str] = None
) -> None:
    local_path = Path(local_path)
    ensure_dir(local_path.parent)
    s3 = _boto3_client("s3", region=region)
    s3.download_file(bucket, key, str(local_path))
