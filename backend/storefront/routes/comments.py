import logging

from flask import Blueprint, jsonify

from storefront.errors import StoreError, ValidationFailure
from storefront.models.comment import CommentIn, CommentRemoval
from storefront.models.validation import validate_payload
from storefront.routes.responses import bare_status, json_body
from storefront.services.catalog_service import get_catalog

logger = logging.getLogger(__name__)

comments_bp = Blueprint('comments', __name__)


@comments_bp.route('/comments', methods=['POST'])
def add_comment():
    """添加评论 - product_id must name an existing product"""
    comment = validate_payload(CommentIn, json_body())
    if isinstance(comment, ValidationFailure):
        logger.info("Failed comment validation: %s", comment.describe())
        return bare_status(400)

    try:
        added = get_catalog().add_comment(comment)
    except StoreError as e:
        logger.error("Saving comment failed: %s", e)
        return bare_status(400)

    if isinstance(added, ValidationFailure):
        logger.info("Failed comment validation: %s", added.describe())
        return bare_status(400)

    return jsonify({'added': added})


@comments_bp.route('/removecomment', methods=['POST'])
def remove_comment():
    removal = validate_payload(CommentRemoval, json_body())
    if isinstance(removal, ValidationFailure):
        logger.info("Rejected comment removal: %s", removal.describe())
        return bare_status(400)

    try:
        removed = get_catalog().remove_comment(removal.record_id)
    except StoreError as e:
        logger.error("Removing comment %s failed: %s", removal.record_id, e)
        return bare_status(400)

    return jsonify({'removed': removed})
