"""
Shared fixtures: a JSON store in a temp directory and a Flask app on top.

Run:
    cd <project-root>
    python -m pytest tests -v
"""

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'backend'))

from config import Config  # noqa: E402
from storefront import create_app  # noqa: E402
from storefront.services.record_store import JsonFileStore  # noqa: E402


class StorefrontTestConfig(Config):
    TESTING = True
    MONGO_URI = ''
    CORS_POLICY = 'allowlist'
    CORS_ALLOWED_ORIGINS = ['http://localhost:5500', 'https://thepante.github.io']
    PRODUCT_LIST_LIMIT = 14
    CATEGORY_FILTER_ENABLED = False
    LOG_LEVEL = 'WARNING'


def make_product(product_id, category=1, cost=10, **overrides):
    product = {
        'id': product_id,
        'category': category,
        'name': f'Product {product_id}',
        'summary': 'Short summary',
        'description': 'Long description',
        'cost': cost,
        'currency': 'USD',
        'soldCount': 0,
        'images': ['img/a.jpg'],
    }
    product.update(overrides)
    return product


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(str(tmp_path / 'db'))


@pytest.fixture
def seeded_store(store):
    """Two categories, three products, three comments."""
    categories = store.collection('categories')
    categories.save({'id': 1, 'name': 'Autos'})
    categories.save({'id': 2, 'name': 'Juguetes'})

    products = store.collection('products')
    products.save(make_product('p-cheap', category=1, cost=5))
    products.save(make_product('p-mid', category=2, cost=15))
    products.save(make_product('p-pricey', category=1, cost=25))

    comments = store.collection('comments')
    comments.save({'product_id': 'p-mid', 'user': 'ana', 'description': 'ok',
                   'dateTime': '2020-02-21 15:05:22', 'score': '4'})
    comments.save({'product_id': 'p-cheap', 'user': 'leo', 'description': 'meh',
                   'dateTime': '2020-02-22 10:00:00', 'score': 2})
    comments.save({'product_id': 'p-mid', 'user': 'sol', 'description': 'great',
                   'dateTime': '2020-02-23 09:30:00', 'score': 5})
    return store


@pytest.fixture
def app(seeded_store):
    return create_app(StorefrontTestConfig, store=seeded_store)


@pytest.fixture
def client(app):
    return app.test_client()
