"""
Load product categories into the record store.

Run:
    python backend/tools/import_categories.py --seeds categories.json
    python backend/tools/import_categories.py --seeds categories.json --overwrite

The seeds file is a JSON list of {"id": <int>, "name": <str>} objects.
"""

import argparse
import json
import os
import sys
from typing import List

BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, BACKEND_DIR)

from pymongo import MongoClient  # noqa: E402

from config import Config  # noqa: E402
from storefront.errors import ValidationFailure  # noqa: E402
from storefront.models.category import Category  # noqa: E402
from storefront.models.validation import validate_payload  # noqa: E402
from storefront.services.record_store import JsonFileStore, MongoStore, RecordStore  # noqa: E402


def load_categories(path: str) -> List[Category]:
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError("Seeds file must contain a JSON list")

    categories = []
    for index, item in enumerate(data):
        category = validate_payload(Category, item)
        if isinstance(category, ValidationFailure):
            raise ValueError(f"Seed #{index}: {category.describe()}")
        categories.append(category)
    return categories


def import_categories(store: RecordStore, categories: List[Category], overwrite: bool = False) -> int:
    """Save categories whose id is not stored yet; returns how many were saved."""
    collection = store.collection("categories")
    if overwrite:
        collection.remove()

    added = 0
    for category in categories:
        if collection.find_one({"id": category.id}) is not None:
            continue
        collection.save(category.model_dump())
        added += 1
    return added


def open_store(data_path: str, mongo_uri: str, mongo_dbname: str) -> RecordStore:
    if mongo_uri:
        client = MongoClient(mongo_uri, serverSelectionTimeoutMS=3000)
        return MongoStore(client.get_default_database(default=mongo_dbname), Config.COLLECTIONS)
    return JsonFileStore(data_path, Config.COLLECTIONS)


def main() -> None:
    parser = argparse.ArgumentParser(description="Import product categories into the store")
    parser.add_argument("--seeds", required=True, help="Path to category seed JSON")
    parser.add_argument("--data-path", default=Config.DATA_PATH, help="JSON store directory")
    parser.add_argument("--mongo-uri", default=Config.MONGO_URI, help="Use this MongoDB instead of JSON files")
    parser.add_argument("--overwrite", action="store_true", help="Replace all stored categories")
    args = parser.parse_args()

    categories = load_categories(args.seeds)
    store = open_store(args.data_path, args.mongo_uri, Config.MONGO_DBNAME)
    added = import_categories(store, categories, overwrite=args.overwrite)

    target = "MongoDB" if args.mongo_uri else args.data_path
    print(f"Imported {added}/{len(categories)} categories -> {target}")


if __name__ == "__main__":
    main()
