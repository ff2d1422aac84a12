"""
后台编辑表单状态机: Idle | Adding | Editing(id)
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from ..models.product import Product
from .product_store import ProductStore
from .product_validation import build_product_payload


class EditorStateError(RuntimeError):
    """Transition not allowed from the current editor state."""


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Adding:
    pass


@dataclass(frozen=True)
class Editing:
    product_id: int


EditorState = Union[Idle, Adding, Editing]


def format_price(price: float) -> str:
    """Render a price for the form: whole numbers without a trailing ".0"."""
    if float(price).is_integer():
        return str(int(price))
    return str(price)


def empty_form() -> Dict[str, str]:
    return {'name': '', 'category': '', 'price': '', 'date': ''}


@dataclass
class AdminEditor:
    """Pending form values plus the add/edit mode of the admin view."""
    state: EditorState = field(default_factory=Idle)
    form: Dict[str, str] = field(default_factory=empty_form)

    @property
    def can_start_new(self) -> bool:
        """The "Nuevo Producto" button is only offered while idle."""
        return isinstance(self.state, Idle)

    def _require_idle(self, action: str) -> None:
        if not isinstance(self.state, Idle):
            raise EditorStateError(f"Cannot {action} while {type(self.state).__name__}")

    def start_add(self) -> None:
        self._require_idle('start adding')
        self.state = Adding()
        self.form = empty_form()

    def start_edit(self, product: Product) -> None:
        self._require_idle('start editing')
        self.state = Editing(product.id)
        category = product.category
        self.form = {
            'name': product.name,
            'category': getattr(category, 'value', category),
            'price': format_price(product.price),
            'date': product.date,
        }

    def set_field(self, name: str, value: str) -> None:
        if name not in self.form:
            raise KeyError(name)
        self.form[name] = value

    def submit(self, store: ProductStore) -> Optional[Product]:
        """提交表单: Adding -> add, Editing -> update，然后回到 Idle

        Validation errors propagate and leave the editor where it was.
        Returns the stored product, or None when an edited product has
        disappeared from the store in the meantime.
        """
        if isinstance(self.state, Idle):
            raise EditorStateError("Nothing to submit")

        payload = build_product_payload(self.form)
        result: Optional[Product]
        if isinstance(self.state, Editing):
            product = Product(id=self.state.product_id, **payload)
            result = product if store.update(product) else None
        else:
            result = store.add(payload)

        self.cancel()
        return result

    def cancel(self) -> None:
        self.state = Idle()
        self.form = empty_form()
