"""
商品排序工具 - 负责结果排序

Python's sorted() is stable, so every mode keeps the prior relative order of
products with equal keys.
"""

import unicodedata
from datetime import datetime
from typing import Any, Iterable, List, Optional

from ..models.product import Product, SortKey

SORT_KEY_ALIASES = {
    '': SortKey.NONE,
    'none': SortKey.NONE,
    'name': SortKey.NAME,
    'price': SortKey.PRICE,
    'date': SortKey.DATE,
}


def resolve_sort_key(sort_by: Any) -> SortKey:
    """Resolve a raw sort choice; unknown values fall back to input order."""
    if isinstance(sort_by, SortKey):
        return sort_by
    normalized = str(sort_by or '').strip().lower()
    return SORT_KEY_ALIASES.get(normalized, SortKey.NONE)


def parse_date(value: Any) -> Optional[datetime]:
    """Parse YYYY-MM-DD dates safely."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        return None


def collation_key(text: str) -> tuple:
    """Locale-style ordering: accents and case only break ties, lowercase first."""
    raw = text or ''
    decomposed = unicodedata.normalize('NFKD', raw)
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), raw.casefold(), raw.swapcase())


def sort_by_name(products: Iterable[Product]) -> List[Product]:
    """按名称升序"""
    return sorted(products, key=lambda p: collation_key(p.name))


def sort_by_price(products: Iterable[Product]) -> List[Product]:
    """按价格升序"""
    return sorted(products, key=lambda p: p.price)


def sort_by_date(products: Iterable[Product]) -> List[Product]:
    """按日期升序；无法解析的日期排在最后"""
    def _key(product: Product):
        parsed = parse_date(product.date)
        return (parsed is None, parsed or datetime.min)

    return sorted(products, key=_key)


def sort_products(products: Iterable[Product], sort_key: SortKey = SortKey.NONE) -> List[Product]:
    """统一排序入口"""
    mode = resolve_sort_key(sort_key)
    if mode == SortKey.NAME:
        return sort_by_name(products)
    if mode == SortKey.PRICE:
        return sort_by_price(products)
    if mode == SortKey.DATE:
        return sort_by_date(products)
    return list(products)
