"""
商品过滤器 - 负责筛选条件解析和过滤逻辑
"""

import math
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..models.product import Category, FilterCriteria, Product
from . import product_sorting as sorting

ISO_DATE_FORMAT = '%Y-%m-%d'


def parse_price_bound(value: Any) -> Optional[float]:
    """Parse a price bound; blank or unparseable input means "no bound"."""
    if value is None or isinstance(value, bool):
        return None
    raw = str(value).strip()
    if not raw:
        return None
    try:
        parsed = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(parsed):
        return None
    return parsed


def parse_date_bound(value: Any) -> Optional[str]:
    """Accept only real calendar dates in YYYY-MM-DD form."""
    raw = str(value or '').strip()
    if len(raw) != 10:
        return None
    try:
        datetime.strptime(raw, ISO_DATE_FORMAT)
    except ValueError:
        return None
    return raw


def parse_category(value: Any) -> Optional[Union[Category, str]]:
    """Blank means "all categories"; an unknown label is kept so it matches nothing."""
    raw = str(value or '').strip()
    if not raw:
        return None
    return Category.parse(raw) or raw


def build_criteria(raw: Mapping[str, Any]) -> FilterCriteria:
    """从原始查询参数构建筛选条件（永不抛异常）

    Keys: q, category, min_price, max_price, start_date, end_date, sort.
    """
    return FilterCriteria(
        text=str(raw.get('q') or ''),
        category=parse_category(raw.get('category')),
        price_min=parse_price_bound(raw.get('min_price')),
        price_max=parse_price_bound(raw.get('max_price')),
        date_start=parse_date_bound(raw.get('start_date')),
        date_end=parse_date_bound(raw.get('end_date')),
        sort_key=sorting.resolve_sort_key(raw.get('sort')),
    )


def matches_text(product: Product, text: str) -> bool:
    """名称包含关键词（不区分大小写，空关键词匹配全部）"""
    if not text:
        return True
    return text.lower() in (product.name or '').lower()


def matches_category(product: Product, category: Optional[Union[Category, str]]) -> bool:
    if category is None:
        return True
    return product.category == category


def matches_price(product: Product, price_min: Optional[float] = None,
                  price_max: Optional[float] = None) -> bool:
    """Inclusive price range; either end may be open."""
    if price_min is not None and product.price < price_min:
        return False
    if price_max is not None and product.price > price_max:
        return False
    return True


def matches_date(product: Product, date_start: Optional[str] = None,
                 date_end: Optional[str] = None) -> bool:
    # ISO dates order the same lexicographically and chronologically.
    if date_start and product.date < date_start:
        return False
    if date_end and product.date > date_end:
        return False
    return True


def matches_criteria(product: Product, criteria: FilterCriteria) -> bool:
    return (
        matches_text(product, criteria.text)
        and matches_category(product, criteria.category)
        and matches_price(product, criteria.price_min, criteria.price_max)
        and matches_date(product, criteria.date_start, criteria.date_end)
    )


def filter_products(products: Iterable[Product], criteria: FilterCriteria) -> List[Product]:
    """按全部条件筛选（AND 逻辑），保持输入顺序"""
    return [p for p in products if matches_criteria(p, criteria)]
