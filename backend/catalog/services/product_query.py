"""
筛选 + 排序流水线
"""

from typing import Iterable, List, Optional

from ..models.product import FilterCriteria, Product
from . import product_filters as filters
from . import product_sorting as sorting


class FilterSortEngine:
    """Pure (products, criteria) -> ordered products transformation."""

    @staticmethod
    def apply(products: Iterable[Product], criteria: Optional[FilterCriteria] = None) -> List[Product]:
        """先筛选再排序，返回新列表，不修改输入"""
        criteria = criteria or FilterCriteria()
        results = filters.filter_products(products, criteria)
        return sorting.sort_products(results, criteria.sort_key)
