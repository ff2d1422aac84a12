"""
商品服务 - 高级业务逻辑层

本模块只包含高级业务逻辑，底层实现委托给:
- product_store: 内存商品集合与增删改
- product_filters: 条件解析和过滤逻辑
- product_sorting: 排序
- product_validation: 表单数据校验
"""

from typing import Any, Dict, List, Mapping, Optional

from ..models.product import Category, Product
from . import product_filters as filters
from .product_query import FilterSortEngine
from .product_store import ProductStore
from .product_validation import build_product_payload


class ProductService:
    """商品服务类 - 面向 HTTP 层的入口"""

    def __init__(self, store: Optional[ProductStore] = None):
        self.store = store if store is not None else ProductStore()

    # ========== 查询 ==========

    def list_products(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.store.list()]

    def get_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        product = self.store.get(product_id)
        return product.to_dict() if product else None

    def search_products(self, args: Mapping[str, Any]) -> Dict[str, Any]:
        """
        搜索商品

        参数 (原始字符串):
        - q: 名称关键词
        - category: 分类
        - min_price / max_price: 价格区间
        - start_date / end_date: 日期区间
        - sort: 排序方式 (name/price/date)
        """
        criteria = filters.build_criteria(args)
        results = FilterSortEngine.apply(self.store.list(), criteria)
        return {
            'products': [p.to_dict() for p in results],
            'total': len(results),
            'criteria': criteria.to_dict(),
        }

    @staticmethod
    def get_categories() -> List[Dict[str, str]]:
        return [{'id': c.value, 'name': c.label} for c in Category]

    # ========== 增删改 ==========

    def create_product(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        payload = build_product_payload(raw)
        return self.store.add(payload).to_dict()

    def update_product(self, product_id: int, raw: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """整体替换；商品不存在时返回 None"""
        payload = build_product_payload(raw)
        product = Product(id=product_id, **payload)
        if not self.store.update(product):
            return None
        return product.to_dict()

    def delete_product(self, product_id: int) -> bool:
        return self.store.delete(product_id)
