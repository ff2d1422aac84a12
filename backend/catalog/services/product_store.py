"""
商品仓库 - 内存中的权威商品集合及其增删改
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..models.product import Category, Product

# 示例数据（演示用初始商品）
SAMPLE_PRODUCTS = [
    {'id': 1, 'name': 'Laptop Pro', 'category': 'Electronics', 'price': 999.99, 'date': '2024-03-01'},
    {'id': 2, 'name': 'Smart Watch', 'category': 'Electronics', 'price': 199.99, 'date': '2024-02-15'},
    {'id': 3, 'name': 'Running Shoes', 'category': 'Sports', 'price': 89.99, 'date': '2024-03-10'},
    {'id': 4, 'name': 'Coffee Maker', 'category': 'Home', 'price': 49.99, 'date': '2024-01-20'},
    {'id': 5, 'name': 'Wireless Mouse', 'category': 'Electronics', 'price': 29.99, 'date': '2024-03-05'},
]


class ProductStore:
    """Owns the product collection. Insertion order is preserved.

    ``update`` and ``delete`` on an unknown id leave the collection untouched
    and return False instead of raising.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])

    @classmethod
    def with_sample_data(cls) -> 'ProductStore':
        store = cls(Product.from_dict(item) for item in SAMPLE_PRODUCTS)
        print(f"  ✓ 加载 {len(store)} 个示例商品")
        return store

    def __len__(self) -> int:
        return len(self._products)

    def next_id(self) -> int:
        return max([0] + [p.id for p in self._products]) + 1

    def list(self) -> Tuple[Product, ...]:
        """当前商品快照（只读）"""
        return tuple(self._products)

    def get(self, product_id: int) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def add(self, data: Mapping[str, Any]) -> Product:
        """新增商品，id = 现有最大 id + 1"""
        fields: Dict[str, Any] = {k: v for k, v in dict(data).items() if k != 'id'}
        category = fields.get('category', '')
        fields['category'] = Category.parse(category) or category
        product = Product(id=self.next_id(), **fields)
        self._products.append(product)
        return product

    def update(self, product: Product) -> bool:
        """按 id 整体替换，保持原位置"""
        for index, existing in enumerate(self._products):
            if existing.id == product.id:
                self._products[index] = product
                return True
        return False

    def delete(self, product_id: int) -> bool:
        remaining = [p for p in self._products if p.id != product_id]
        removed = len(remaining) != len(self._products)
        self._products = remaining
        return removed
