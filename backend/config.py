from pathlib import Path
from dotenv import load_dotenv

from storefront.services.env_utils import env_flag, env_int, env_list, env_str

load_dotenv()

# backend/ 目录
BACKEND_ROOT = Path(__file__).parent

DEFAULT_ALLOWED_ORIGINS = [
    'https://thepante.github.io',
    'http://localhost:3000',
    'http://localhost:5500',
    'http://localhost:8080',
]


class Config:
    """应用配置"""

    # Flat-file store: one <collection>.json per collection in DATA_PATH
    DATA_PATH = env_str('DATA_PATH', str(BACKEND_ROOT / 'db'))
    COLLECTIONS = ('categories', 'products', 'comments', 'users')

    # MongoDB 配置 (empty MONGO_URI keeps the JSON store)
    MONGO_URI = env_str('MONGO_URI')
    MONGO_DBNAME = env_str('MONGO_DBNAME', 'storefront')

    # CORS_POLICY: "allowlist" rejects unknown origins, "wildcard" accepts all
    # Example:
    # CORS_ALLOWED_ORIGINS=https://thepante.github.io,http://localhost:5500
    CORS_POLICY = env_str('CORS_POLICY', 'allowlist').lower()
    CORS_ALLOWED_ORIGINS = env_list('CORS_ALLOWED_ORIGINS', DEFAULT_ALLOWED_ORIGINS)
    CORS_ALLOWED_METHODS = ['GET', 'POST']
    CORS_ALLOWED_HEADERS = ['Origin', 'X-Requested-With', 'Content-Type', 'Accept']

    HOME_REDIRECT_URL = env_str('HOME_REDIRECT_URL', 'https://github.com/thepante')

    # Product listing
    PRODUCT_LIST_LIMIT = env_int('PRODUCT_LIST_LIMIT', 14)
    # Off: a category alone never narrows /products
    CATEGORY_FILTER_ENABLED = env_flag('CATEGORY_FILTER_ENABLED')

    LOG_LEVEL = env_str('LOG_LEVEL', 'INFO').upper()
    DEBUG = env_flag('FLASK_DEBUG')

    PORT = env_int('PORT', 3000)
