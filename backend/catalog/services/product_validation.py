"""
Form payload coercion for create/edit.

Raw form values arrive as strings. This is the only place that enforces
required fields; ProductStore itself stores whatever it is given.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping

from ..models.product import Category
from .product_filters import parse_date_bound


class ProductValidationError(ValueError):
    """Raised when a product form cannot be coerced into a payload."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        detail = ', '.join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(f"Invalid product data ({detail})")


def _parse_price(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        price = float(str(value).strip())
    except ValueError:
        return None
    if math.isnan(price) or math.isinf(price):
        return None
    return price


def build_product_payload(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Coerce form values into ``{name, category, price, date}``."""
    errors: Dict[str, str] = {}

    name = str(raw.get('name') or '').strip()
    if not name:
        errors['name'] = 'required'

    category = Category.parse(raw.get('category'))
    if category is None:
        errors['category'] = 'must be one of ' + ', '.join(c.value for c in Category)

    price = _parse_price(raw.get('price'))
    if price is None:
        errors['price'] = 'must be a number'
    elif price < 0:
        errors['price'] = 'must not be negative'

    date = parse_date_bound(raw.get('date'))
    if date is None:
        errors['date'] = 'must be a YYYY-MM-DD date'

    if errors:
        raise ProductValidationError(errors)

    return {'name': name, 'category': category, 'price': price, 'date': date}
