import logging

from flask import Flask, request
from flask_cors import CORS
from flask_pymongo import PyMongo

from storefront.routes.responses import bare_status
from storefront.services.catalog_service import EXTENSION_KEY, CatalogService
from storefront.services.record_store import DEFAULT_COLLECTIONS, JsonFileStore, MongoStore, RecordStore

mongo = PyMongo()

logger = logging.getLogger(__name__)


def _configure_logging(app: Flask) -> None:
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    logging.getLogger('storefront').setLevel(level)


def _install_cors(app: Flask) -> None:
    """CORS headers plus, for the allowlist policy, an origin gate."""
    methods = app.config.get('CORS_ALLOWED_METHODS', ['GET', 'POST'])
    headers = app.config.get('CORS_ALLOWED_HEADERS', [])

    if app.config.get('CORS_POLICY') == 'wildcard':
        CORS(app, origins='*', send_wildcard=True, methods=methods, allow_headers=headers)
        return

    allowed_origins = set(app.config.get('CORS_ALLOWED_ORIGINS', []))
    CORS(app, origins=sorted(allowed_origins), methods=methods, allow_headers=headers)

    @app.before_request
    def check_origin():
        origin = request.headers.get('Origin')
        if origin and origin not in allowed_origins:
            logger.warning("Rejected request from origin %s", origin)
            return bare_status(403)


def _build_store(app: Flask) -> RecordStore:
    collections = app.config.get('COLLECTIONS', DEFAULT_COLLECTIONS)
    if app.config.get('MONGO_URI'):
        mongo.init_app(app)
        database = mongo.cx.get_default_database(default=app.config.get('MONGO_DBNAME', 'storefront'))
        logger.info("Using MongoDB store (%s)", database.name)
        return MongoStore(database, collections)

    logger.info("Using JSON store in %s", app.config['DATA_PATH'])
    return JsonFileStore(app.config['DATA_PATH'], collections)


def create_app(config_object=None, store: RecordStore = None) -> Flask:
    """创建 Flask 应用

    ``store`` replaces the store built from the configuration (JSON files,
    or MongoDB when MONGO_URI is set).
    """
    if config_object is None:
        from config import Config
        config_object = Config

    app = Flask(__name__)
    app.config.from_object(config_object)

    _configure_logging(app)
    _install_cors(app)

    if store is None:
        store = _build_store(app)
    app.extensions[EXTENSION_KEY] = CatalogService(
        store,
        list_limit=app.config.get('PRODUCT_LIST_LIMIT', 14),
        category_filter_enabled=app.config.get('CATEGORY_FILTER_ENABLED', False),
    )

    # 注册蓝图
    from storefront.routes.status import status_bp
    from storefront.routes.products import products_bp
    from storefront.routes.comments import comments_bp

    app.register_blueprint(status_bp)
    app.register_blueprint(products_bp)
    app.register_blueprint(comments_bp)

    return app
