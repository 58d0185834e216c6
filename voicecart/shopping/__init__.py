from voicecart.shopping.categories import categorize
from voicecart.shopping.catalog import CatalogProduct, ProductIndex, SubstringIndex, load_catalog
from voicecart.shopping.items import normalize_name
from voicecart.shopping.shopping_list import HistoryLog, ListEntry, ShoppingList
from voicecart.shopping.suggestions import suggest
