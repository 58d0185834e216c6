"""Mock product catalog and search.

The catalog is a static JSON list of {name, brand, price} records loaded once.
Search goes through a ProductIndex so an indexed implementation can replace
the substring scan without touching callers.

Entry point: SubstringIndex(load_catalog()).search("toothpaste", max_price=5)
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


@dataclass(frozen=True)
class CatalogProduct:
    name: str
    brand: str
    price: float


def load_catalog(path=CATALOG_PATH) -> List[CatalogProduct]:
    """Read catalog records from a JSON file."""
    with open(path, encoding="utf-8") as f:
        records = json.load(f)
    return [CatalogProduct(r["name"], r["brand"], float(r["price"])) for r in records]


class ProductIndex:
    """Interface for catalog search backends."""

    def search(self, query: str, max_price: Optional[float] = None) -> List[CatalogProduct]:
        raise NotImplementedError


class SubstringIndex(ProductIndex):
    """Linear scan: case-insensitive substring match on name or brand."""

    def __init__(self, products: Sequence[CatalogProduct]) -> None:
        self._products = list(products)

    def __len__(self):
        return len(self._products)

    def search(self, query: str, max_price: Optional[float] = None) -> List[CatalogProduct]:
        q = query.lower()
        results = [p for p in self._products
                   if q in p.name.lower() or q in p.brand.lower()]
        if max_price is not None:
            results = [p for p in results if p.price <= max_price]
        return results


_default_index = None


def default_index():
    """Search index over the bundled catalog, loaded on first use."""
    global _default_index
    if _default_index is None:
        _default_index = SubstringIndex(load_catalog())
    return _default_index
