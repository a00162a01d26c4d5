"""
目录服务 - the operations behind the HTTP routes.

The record store is handed to CatalogService at construction; the routes
reach the app's instance through get_catalog().
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from flask import current_app

from storefront.errors import NotFoundError, ValidationFailure
from storefront.models.comment import CommentIn
from storefront.models.product import ProductIn

from . import catalog_filters as filters
from .record_store import RecordStore, new_record_id

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'storefront.catalog'


class CatalogService:
    """Products, categories and comments on top of a RecordStore"""

    def __init__(
        self,
        store: RecordStore,
        id_factory: Callable[[], str] = new_record_id,
        list_limit: int = filters.PRODUCT_LIST_LIMIT,
        category_filter_enabled: bool = False,
    ):
        self.store = store
        self.list_limit = list_limit
        self.category_filter_enabled = category_filter_enabled
        self._id_factory = id_factory
        self._products = store.collection('products')
        self._categories = store.collection('categories')
        self._comments = store.collection('comments')

    # ========== 查询 ==========

    def get_comments(self, product_id: str) -> List[Dict[str, Any]]:
        return filters.comments_for_product(self._comments.find(), product_id)

    def get_product_info(self, product_id: str) -> Dict[str, Any]:
        """Product detail with its category name; NotFoundError if absent."""
        product = self._products.find_one({'id': product_id})
        if product is None:
            raise NotFoundError(f"product {product_id} not found")

        category = self._categories.find_one({'id': product.get('category')})
        if category is None:
            raise NotFoundError(f"category {product.get('category')} of product {product_id} not found")

        return filters.product_detail(product, category)

    def get_products(
        self,
        category: Optional[int] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> List[Dict[str, Any]]:
        return filters.filter_products(
            self._products.find(),
            category=category,
            min_price=min_price,
            max_price=max_price,
            limit=self.list_limit,
            category_filter_enabled=self.category_filter_enabled,
        )

    # ========== 写入 ==========

    def add_comment(self, comment: CommentIn) -> Union[str, bool, ValidationFailure]:
        """Persist a comment; returns its store id (False if none was assigned)."""
        if self._products.find_one({'id': comment.product_id}) is None:
            return ValidationFailure('unknown product', fields=['product_id'])

        added = self._comments.save(comment.to_record())
        logger.info("Comment %s added to product %s", added.get('_id'), comment.product_id)
        return added.get('_id') or False

    def remove_comment(self, record_id: str) -> bool:
        """Remove one comment by store id; True once it can no longer be found."""
        self._comments.remove({'_id': record_id}, multi=False)
        return self._comments.find_one({'_id': record_id}) is None

    def add_product(self, product: ProductIn) -> Union[str, bool, ValidationFailure]:
        """Persist a product under a new id; returns that id (False if missing)."""
        if self._categories.find_one({'id': product.category}) is None:
            return ValidationFailure('unknown category', fields=['category'])

        added = self._products.save(product.to_record(self._new_product_id()))
        logger.info("Product %s added to category %s", added.get('id'), product.category)
        return added.get('id') or False

    def remove_product(self, product_id: str) -> bool:
        """Remove one product by id. Its comments are left in place."""
        self._products.remove({'id': product_id}, multi=False)
        return self._products.find_one({'id': product_id}) is None

    def _new_product_id(self) -> str:
        product_id = self._id_factory()
        while self._products.find_one({'id': product_id}) is not None:
            product_id = self._id_factory()
        return product_id


def get_catalog() -> CatalogService:
    """CatalogService of the current app"""
    return current_app.extensions[EXTENSION_KEY]
