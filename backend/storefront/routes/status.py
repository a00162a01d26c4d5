import logging

from flask import Blueprint, current_app, redirect, request

from storefront.routes.responses import bare_status

logger = logging.getLogger(__name__)

status_bp = Blueprint('status', __name__)


@status_bp.route('/ping', methods=['GET'])
def ping():
    """存活检查"""
    logger.info("Ping from %s", request.host)
    return bare_status(200)


@status_bp.route('/', methods=['GET'])
def home():
    return redirect(current_app.config['HOME_REDIRECT_URL'])
