import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class Category(str, Enum):
    """商品分类（封闭集合，校验/筛选/展示共用）"""

    ELECTRONICS = 'Electronics'
    SPORTS = 'Sports'
    HOME = 'Home'

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> Optional['Category']:
        """Return the member for a raw value, or None when it is not in the vocabulary."""
        if isinstance(value, cls):
            return value
        raw = str(value or '').strip()
        for member in cls:
            if member.value == raw:
                return member
        return None


CATEGORY_LABELS = {
    Category.ELECTRONICS: 'Electrónicos',
    Category.SPORTS: 'Deportes',
    Category.HOME: 'Hogar',
}


class SortKey(str, Enum):
    """结果排序方式"""

    NONE = 'none'
    NAME = 'name'
    PRICE = 'price'
    DATE = 'date'


@dataclass(frozen=True)
class Product:
    """目录商品"""
    id: int
    name: str
    category: Union[Category, str]
    price: float
    date: str  # ISO YYYY-MM-DD

    def to_dict(self) -> Dict[str, Any]:
        data = dataclasses.asdict(self)
        if isinstance(self.category, Category):
            data['category'] = self.category.value
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Product':
        """从字典创建商品"""
        category = data.get('category', '')
        return Product(
            id=int(data['id']),
            name=data.get('name', ''),
            category=Category.parse(category) or category,
            price=float(data.get('price', 0)),
            date=data.get('date', ''),
        )


@dataclass(frozen=True)
class FilterCriteria:
    """One query's filter/sort parameters. The default value matches everything."""
    text: str = ''
    # Unknown labels are kept as raw text so they match nothing.
    category: Optional[Union[Category, str]] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    date_start: Optional[str] = None
    date_end: Optional[str] = None
    sort_key: SortKey = SortKey.NONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'q': self.text,
            'category': getattr(self.category, 'value', self.category),
            'min_price': self.price_min,
            'max_price': self.price_max,
            'start_date': self.date_start,
            'end_date': self.date_end,
            'sort': self.sort_key.value,
        }
