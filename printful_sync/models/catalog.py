"""
Printful data models.

Pure data classes mirroring the Printful API payloads used by the sync
workflow. Parsing from API dicts lives here; no HTTP calls.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class CatalogVariant:
    """A purchasable size/colour instance of a catalog product."""
    id: int
    product_id: int
    name: str
    retail_price: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CatalogVariant":
        # v2 catalog uses catalog_product_id, v1 product_id
        product_id = data.get("catalog_product_id", data.get("product_id", 0))
        return cls(
            id=data.get("id", 0),
            product_id=product_id,
            name=data.get("name", ""),
            retail_price=str(data.get("retail_price") or data.get("price") or ""),
        )


@dataclass
class CatalogProduct:
    """A sellable item template from the Printful catalog."""
    id: int
    name: str
    type: str = ""
    brand: str = ""
    model: str = ""
    variant_count: int = 0
    variants: List[CatalogVariant] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CatalogProduct":
        variants = data.get("variants")
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            type=data.get("type") or "",
            brand=data.get("brand") or "",
            model=data.get("model") or "",
            variant_count=data.get("variant_count", 0),
            variants=[
                CatalogVariant.from_api(v)
                for v in variants if isinstance(v, dict)
            ] if isinstance(variants, list) else [],
            raw=data,
        )


@dataclass
class UploadedFile:
    """Reference to a file stored in the Printful file library."""
    id: int
    url: str


@dataclass
class SyncVariant:
    """One variant entry of a sync product."""
    external_id: str
    variant_id: int
    retail_price: str
    file_url: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "external_id": self.external_id,
            "variant_id": self.variant_id,
            "retail_price": self.retail_price,
            "files": [
                {"type": "default", "url": self.file_url},
            ],
        }


@dataclass
class SyncProductRequest:
    """
    Body of POST /sync/products.

    The external id is caller-assigned; Printful rejects a second product
    with the same external id, so reruns are not idempotent.
    """
    external_id: str
    name: str
    variants: List[SyncVariant] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "sync_product": {
                "external_id": self.external_id,
                "name": self.name,
                "variants": [v.to_payload() for v in self.variants],
            }
        }
