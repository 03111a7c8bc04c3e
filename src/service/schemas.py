from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class QuoteResponse:
    product_key: str
    product_name: str
    currency: str
    quote: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_key": self.product_key,
            "product_name": self.product_name,
            "currency": self.currency,
            "quote": self.quote,
        }
