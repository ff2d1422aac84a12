# Services package
#
# This package provides the product catalog services.
#
# Module structure:
# - product_service.py: High-level business logic (main API)
# - product_store.py: In-memory product collection (add/update/delete/list)
# - product_query.py: FilterSortEngine, the filter + sort pipeline
# - product_filters.py: Criteria parsing and filtering predicates
# - product_sorting.py: Stable sort modes
# - product_validation.py: Form payload coercion
# - admin_editor.py: Idle / Adding / Editing state of the admin form
#
#   from catalog.services import ProductService

from .product_service import ProductService
from .product_store import ProductStore
from .product_query import FilterSortEngine
from . import product_filters
from . import product_sorting

__all__ = [
    'ProductService',
    'ProductStore',
    'FilterSortEngine',
    'product_filters',
    'product_sorting',
]
