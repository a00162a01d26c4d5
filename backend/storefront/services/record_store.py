"""
记录存储 - named document collections backed by JSON files or MongoDB.

Both backends expose the same collection calls:
- find(query=None) -> list of records
- find_one(query) -> record or None
- save(record) -> record with a generated ``_id``
- remove(query=None, multi=True) -> number of removed records

Queries are plain equality matches on every key. A record that lacks a
queried key never matches it.
"""

import json
import os
import tempfile
import uuid
from typing import Any, Dict, Iterable, List, Optional

from pymongo.errors import PyMongoError

from storefront.errors import StoreError

DEFAULT_COLLECTIONS = ('categories', 'products', 'comments', 'users')

Record = Dict[str, Any]
Query = Optional[Dict[str, Any]]

_MISSING = object()


def new_record_id() -> str:
    return uuid.uuid4().hex


def matches(record: Record, query: Query) -> bool:
    if not query:
        return True
    return all(record.get(key, _MISSING) == value for key, value in query.items())


class JsonCollection:
    """A collection stored as a JSON array in a single file."""

    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path
        if not os.path.exists(path):
            self._write([])

    def _read(self) -> List[Record]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            raise StoreError(f"cannot read collection '{self.name}': {e}") from e

        if not isinstance(records, list):
            raise StoreError(f"collection '{self.name}' is not a JSON array")
        return records

    def _write(self, records: List[Record]) -> None:
        directory = os.path.dirname(self.path) or '.'
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=f'.{self.name}.', suffix='.tmp', dir=directory)
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(records, f, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(f"cannot write collection '{self.name}': {e}") from e

    def find(self, query: Query = None) -> List[Record]:
        return [record for record in self._read() if matches(record, query)]

    def find_one(self, query: Query = None) -> Optional[Record]:
        for record in self._read():
            if matches(record, query):
                return record
        return None

    def save(self, record: Record) -> Record:
        saved = dict(record)
        saved['_id'] = new_record_id()
        records = self._read()
        records.append(saved)
        self._write(records)
        return saved

    def remove(self, query: Query = None, multi: bool = True) -> int:
        if query is None:
            removed = len(self._read())
            self._write([])
            return removed

        kept: List[Record] = []
        removed = 0
        for record in self._read():
            if matches(record, query) and (multi or removed == 0):
                removed += 1
                continue
            kept.append(record)

        if removed:
            self._write(kept)
        return removed


class MongoCollection:
    """The same collection calls over a pymongo collection.

    Records get string ``_id`` values so both backends hand out the same kind
    of identifier.
    """

    def __init__(self, name: str, collection):
        self.name = name
        self._collection = collection

    @staticmethod
    def _normalize(document: Record) -> Record:
        record = dict(document)
        if '_id' in record:
            record['_id'] = str(record['_id'])
        return record

    def find(self, query: Query = None) -> List[Record]:
        try:
            return [self._normalize(doc) for doc in self._collection.find(dict(query or {}))]
        except PyMongoError as e:
            raise StoreError(f"cannot read collection '{self.name}': {e}") from e

    def find_one(self, query: Query = None) -> Optional[Record]:
        try:
            document = self._collection.find_one(dict(query or {}))
        except PyMongoError as e:
            raise StoreError(f"cannot read collection '{self.name}': {e}") from e
        return self._normalize(document) if document is not None else None

    def save(self, record: Record) -> Record:
        document = dict(record)
        document['_id'] = new_record_id()
        try:
            self._collection.insert_one(document)
        except PyMongoError as e:
            raise StoreError(f"cannot write collection '{self.name}': {e}") from e
        return self._normalize(document)

    def remove(self, query: Query = None, multi: bool = True) -> int:
        try:
            if multi:
                result = self._collection.delete_many(dict(query or {}))
            else:
                result = self._collection.delete_one(dict(query or {}))
        except PyMongoError as e:
            raise StoreError(f"cannot write collection '{self.name}': {e}") from e
        return result.deleted_count


class RecordStore:
    """Named collections, looked up with ``collection(name)``."""

    def __init__(self, collections: Dict[str, Any]):
        self._collections = collections

    @property
    def names(self) -> List[str]:
        return list(self._collections)

    def collection(self, name: str):
        try:
            return self._collections[name]
        except KeyError:
            raise StoreError(f"unknown collection: {name}") from None


class JsonFileStore(RecordStore):
    """One ``<name>.json`` file per collection inside ``data_path``."""

    def __init__(self, data_path: str, collections: Iterable[str] = DEFAULT_COLLECTIONS):
        try:
            os.makedirs(data_path, exist_ok=True)
        except OSError as e:
            raise StoreError(f"cannot create data directory {data_path}: {e}") from e
        self.data_path = data_path
        super().__init__({
            name: JsonCollection(name, os.path.join(data_path, f'{name}.json'))
            for name in collections
        })


class MongoStore(RecordStore):
    """Collections of a pymongo ``Database``."""

    def __init__(self, database, collections: Iterable[str] = DEFAULT_COLLECTIONS):
        self.database = database
        super().__init__({name: MongoCollection(name, database[name]) for name in collections})
