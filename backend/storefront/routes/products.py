import logging

from flask import Blueprint, jsonify, request

from storefront.errors import NotFoundError, StoreError, ValidationFailure
from storefront.models.product import ProductIn, ProductQuery, ProductRemoval
from storefront.models.validation import validate_payload
from storefront.routes.responses import bare_status, json_body
from storefront.services.catalog_service import get_catalog

logger = logging.getLogger(__name__)

products_bp = Blueprint('products', __name__)


@products_bp.route('/product/<kind>/<product_id>', methods=['GET'])
def get_product_resource(kind, product_id):
    """获取产品评论或详情

    kind:
    - comments: comments of the product (may be empty)
    - info: product detail with its category name
    """
    catalog = get_catalog()
    try:
        if kind == 'comments':
            return jsonify(catalog.get_comments(product_id))
        if kind == 'info':
            return jsonify(catalog.get_product_info(product_id))
    except NotFoundError as e:
        logger.info("Product lookup missed: %s", e)
        return bare_status(404)
    except StoreError as e:
        logger.error("Product lookup failed for %s: %s", product_id, e)
        return bare_status(500)

    return bare_status(404)


@products_bp.route('/products', methods=['GET'])
def list_products():
    """
    产品列表

    Query Parameters:
    - cat: 分类 id (required)
    - min: lowest cost
    - max: highest cost
    """
    params = {key: value for key, value in request.args.items() if value != ''}
    query = validate_payload(ProductQuery, params)
    if isinstance(query, ValidationFailure):
        logger.info("Rejected product listing: %s", query.describe())
        return bare_status(400)

    try:
        products = get_catalog().get_products(
            category=query.category,
            min_price=query.min_price,
            max_price=query.max_price,
        )
    except StoreError as e:
        logger.error("Product listing failed: %s", e)
        return bare_status(500)

    return jsonify(products)


@products_bp.route('/product', methods=['POST'])
def add_product():
    product = validate_payload(ProductIn, json_body())
    if isinstance(product, ValidationFailure):
        logger.info("Failed product validation: %s", product.describe())
        return bare_status(400)

    try:
        added = get_catalog().add_product(product)
    except StoreError as e:
        logger.error("Saving product failed: %s", e)
        return bare_status(400)

    if isinstance(added, ValidationFailure):
        logger.info("Failed product validation: %s", added.describe())
        return bare_status(400)

    return jsonify({'added': added})


@products_bp.route('/removeproduct', methods=['POST'])
def remove_product():
    removal = validate_payload(ProductRemoval, json_body())
    if isinstance(removal, ValidationFailure):
        logger.info("Rejected product removal: %s", removal.describe())
        return bare_status(400)

    try:
        removed = get_catalog().remove_product(removal.id)
    except StoreError as e:
        logger.error("Removing product %s failed: %s", removal.id, e)
        return bare_status(400)

    return jsonify({'removed': removed})
