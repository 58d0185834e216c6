import json

import pytest

from voicecart.shopping.catalog import (
    CatalogProduct, ProductIndex, SubstringIndex, default_index, load_catalog,
)

PRODUCTS = [
    CatalogProduct("Strong Teeth Toothpaste", "Colgate", 2.49),
    CatalogProduct("Sensitive Toothpaste", "Sensodyne", 6.5),
    CatalogProduct("Whitening Toothpaste", "Crest", 5.0),
    CatalogProduct("Toothbrush", "Colgate", 1.99),
    CatalogProduct("Whole Milk", "Amul", 1.2),
]


@pytest.fixture
def index():
    return SubstringIndex(PRODUCTS)


def test_search_matches_name_case_insensitively(index):
    assert [p.brand for p in index.search("TOOTHPASTE")] == ["Colgate", "Sensodyne", "Crest"]


def test_search_matches_brand(index):
    assert [p.name for p in index.search("colgate")] == ["Strong Teeth Toothpaste", "Toothbrush"]


def test_search_price_ceiling_is_inclusive(index):
    results = index.search("toothpaste", max_price=5)
    assert [p.brand for p in results] == ["Colgate", "Crest"]
    assert all(p.price <= 5 for p in results)


def test_search_zero_ceiling(index):
    assert index.search("toothpaste", max_price=0) == []


def test_search_no_match(index):
    assert index.search("rubber duck") == []


def test_product_index_is_abstract():
    with pytest.raises(NotImplementedError):
        ProductIndex().search("milk")


def test_load_catalog(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"name": "Soap", "brand": "Dove", "price": 1}]))
    assert load_catalog(path) == [CatalogProduct("Soap", "Dove", 1.0)]


def test_bundled_catalog():
    index = default_index()
    assert len(index) > 0
    assert index is default_index()
    results = index.search("toothpaste", max_price=5)
    assert results
    assert all(p.price <= 5 for p in results)
    assert all("toothpaste" in p.name.lower() or "toothpaste" in p.brand.lower()
               for p in results)
