"""
Tests for the in-memory product store (id assignment, update, delete).
"""

import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(PROJECT_ROOT, "backend"))

from catalog.models.product import Category, Product  # noqa: E402
from catalog.services.product_store import ProductStore  # noqa: E402

DESK_LAMP = {"name": "Desk Lamp", "category": "Home", "price": 19.99, "date": "2024-04-01"}


class TestProductStore:
    def test_add_on_empty_store_assigns_id_one(self):
        store = ProductStore()
        product = store.add(DESK_LAMP)
        assert product.id == 1
        assert store.list() == (product,)

    def test_add_to_sample_set_appends_with_next_id(self):
        store = ProductStore.with_sample_data()
        product = store.add(DESK_LAMP)

        assert product.id == 6
        assert product.category == Category.HOME
        assert len(store.list()) == 6
        assert store.list()[-1] == product

    def test_add_id_exceeds_every_existing_id_even_with_gaps(self):
        store = ProductStore([
            Product(id=7, name="a", category=Category.HOME, price=1.0, date="2024-01-01"),
            Product(id=3, name="b", category=Category.HOME, price=1.0, date="2024-01-01"),
        ])
        assert store.add(DESK_LAMP).id == 8

    def test_add_ignores_caller_supplied_id(self):
        store = ProductStore.with_sample_data()
        product = store.add(dict(DESK_LAMP, id=1))
        assert product.id == 6
        assert [p.id for p in store.list()] == [1, 2, 3, 4, 5, 6]

    def test_add_does_not_revalidate(self):
        store = ProductStore()
        product = store.add({"name": "", "category": "Home", "price": 0.0, "date": "2024-01-01"})
        assert product.name == ""

    def test_update_replaces_in_place(self):
        store = ProductStore.with_sample_data()
        replacement = Product(id=3, name="Trail Shoes", category=Category.SPORTS, price=120.0, date="2024-05-01")

        assert store.update(replacement) is True
        assert store.list()[2] == replacement
        assert [p.id for p in store.list()] == [1, 2, 3, 4, 5]

    def test_update_with_unknown_id_changes_nothing(self):
        store = ProductStore.with_sample_data()
        before = store.list()
        ghost = Product(id=42, name="Ghost", category=Category.HOME, price=1.0, date="2024-01-01")

        assert store.update(ghost) is False
        assert store.list() == before

    def test_delete_twice_is_noop_the_second_time(self):
        store = ProductStore.with_sample_data()

        assert store.delete(3) is True
        assert len(store) == 4
        assert "Running Shoes" not in [p.name for p in store.list()]

        assert store.delete(3) is False
        assert len(store) == 4

    def test_ids_are_not_reused_while_a_higher_id_exists(self):
        store = ProductStore.with_sample_data()
        store.delete(3)
        assert store.add(DESK_LAMP).id == 6

    def test_list_is_a_snapshot(self):
        store = ProductStore.with_sample_data()
        snapshot = store.list()
        store.delete(1)
        assert len(snapshot) == 5
        assert store.get(1) is None
        assert store.get(2).name == "Smart Watch"
