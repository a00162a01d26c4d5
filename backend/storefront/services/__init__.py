# Services package
#
# Module structure:
# - catalog_service.py: CatalogService, the operations the routes call
# - catalog_filters.py: filtering and shaping of store records
# - record_store.py: JSON-file and MongoDB collection backends
# - env_utils.py: environment value helpers used by config
#
#   from storefront.services import CatalogService, JsonFileStore

from .catalog_service import CatalogService, get_catalog
from .record_store import JsonFileStore, MongoStore, RecordStore
from . import catalog_filters

__all__ = [
    'CatalogService',
    'get_catalog',
    'JsonFileStore',
    'MongoStore',
    'RecordStore',
    'catalog_filters',
]
