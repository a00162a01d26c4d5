"""
Tests for CatalogService against a JSON store in a temp directory.
"""

import itertools

import pytest

from conftest import make_product
from storefront.errors import NotFoundError, ValidationFailure
from storefront.models.comment import CommentIn
from storefront.models.product import ProductIn
from storefront.services.catalog_service import CatalogService


def _comment(**overrides):
    payload = {
        'product_id': 'p-mid',
        'user': 'ana',
        'description': 'nice',
        'dateTime': '2020-03-01 12:00:00',
        'score': 4,
    }
    payload.update(overrides)
    return CommentIn.model_validate(payload)


def _product(**overrides):
    payload = {
        'category': 1,
        'name': 'Fiat Way',
        'summary': 'Compact car',
        'description': 'A very compact car',
        'cost': 13500,
        'currency': 'USD',
        'images': ['img/fiat1.jpg', 'img/fiat2.jpg'],
    }
    payload.update(overrides)
    return ProductIn.model_validate(payload)


@pytest.fixture
def catalog(seeded_store):
    return CatalogService(seeded_store)


class TestQueries:

    def test_get_comments(self, catalog):
        comments = catalog.get_comments('p-mid')
        assert [c['user'] for c in comments] == ['ana', 'sol']
        assert all('product_id' not in c for c in comments)
        assert comments[0]['score'] == 4

    def test_get_comments_unknown_product(self, catalog):
        assert catalog.get_comments('nope') == []

    def test_get_product_info(self, catalog):
        info = catalog.get_product_info('p-mid')
        assert info['id'] == 'p-mid'
        assert info['category'] == 'Juguetes'
        assert '_id' not in info
        assert info['description'] == 'Long description'

    def test_get_product_info_missing_product(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.get_product_info('nope')

    def test_get_product_info_missing_category(self, seeded_store, catalog):
        seeded_store.collection('products').save(make_product('orphan', category=99))
        with pytest.raises(NotFoundError):
            catalog.get_product_info('orphan')

    def test_get_products_category_only_is_empty(self, catalog):
        assert catalog.get_products(category=1) == []

    def test_get_products_price_range(self, catalog):
        products = catalog.get_products(category=1, min_price=10, max_price=20)
        assert [p['id'] for p in products] == ['p-mid']

    def test_get_products_with_category_filter_enabled(self, seeded_store):
        catalog = CatalogService(seeded_store, category_filter_enabled=True)
        assert [p['id'] for p in catalog.get_products(category=1)] == ['p-cheap', 'p-pricey']

    def test_get_products_limit(self, seeded_store):
        catalog = CatalogService(seeded_store, list_limit=2)
        assert len(catalog.get_products(category=1, min_price=0)) == 2


class TestComments:

    def test_add_comment(self, seeded_store, catalog):
        added = catalog.add_comment(_comment(score='3.5'))
        stored = seeded_store.collection('comments').find_one({'_id': added})
        assert stored['product_id'] == 'p-mid'
        assert stored['dateTime'] == '2020-03-01 12:00:00'
        assert stored['score'] == 3.5

    def test_add_comment_unknown_product(self, seeded_store, catalog):
        before = len(seeded_store.collection('comments').find())
        result = catalog.add_comment(_comment(product_id='ghost'))
        assert isinstance(result, ValidationFailure)
        assert result.fields == ['product_id']
        assert len(seeded_store.collection('comments').find()) == before

    def test_remove_comment(self, seeded_store, catalog):
        added = catalog.add_comment(_comment())
        assert catalog.remove_comment(added) is True
        assert seeded_store.collection('comments').find_one({'_id': added}) is None

    def test_remove_comment_only_removes_one(self, seeded_store, catalog):
        target = seeded_store.collection('comments').find_one({'user': 'ana'})
        catalog.remove_comment(target['_id'])
        assert [c['user'] for c in catalog.get_comments('p-mid')] == ['sol']


class TestProducts:

    def test_add_product(self, seeded_store, catalog):
        product_id = catalog.add_product(_product())
        stored = seeded_store.collection('products').find_one({'id': product_id})
        assert stored['soldCount'] == 0
        assert stored['category'] == 1
        assert stored['images'] == ['img/fiat1.jpg', 'img/fiat2.jpg']
        assert 'related' not in stored

    def test_add_product_keeps_whole_costs_as_int(self, seeded_store, catalog):
        whole = catalog.add_product(_product(cost='13500'))
        fractional = catalog.add_product(_product(cost=99.9))
        products = seeded_store.collection('products')
        assert isinstance(products.find_one({'id': whole})['cost'], int)
        assert products.find_one({'id': fractional})['cost'] == 99.9

    def test_add_product_unknown_category(self, seeded_store, catalog):
        before = len(seeded_store.collection('products').find())
        result = catalog.add_product(_product(category=42))
        assert isinstance(result, ValidationFailure)
        assert len(seeded_store.collection('products').find()) == before

    def test_generated_ids_skip_existing_ones(self, seeded_store):
        ids = itertools.chain(['p-mid', 'p-cheap'], itertools.count())
        catalog = CatalogService(seeded_store, id_factory=lambda: str(next(ids)))
        assert catalog.add_product(_product()) == '0'

    def test_generated_ids_are_unique(self, catalog):
        ids = {catalog.add_product(_product()) for _ in range(5)}
        assert len(ids) == 5

    def test_remove_product(self, catalog):
        assert catalog.remove_product('p-pricey') is True
        with pytest.raises(NotFoundError):
            catalog.get_product_info('p-pricey')

    def test_remove_product_keeps_comments(self, catalog):
        catalog.remove_product('p-mid')
        assert len(catalog.get_comments('p-mid')) == 2

    def test_remove_unknown_product_reports_removed(self, catalog):
        assert catalog.remove_product('never-existed') is True
