from typing import Dict

from ..errors import IdExhausted
from .codec import INT64_MAX
from .record_store import Document, record_id


class IdAllocator:
    """Tracks the highest integer id seen per collection."""

    def __init__(self):
        self.max_ids: Dict[str, int] = {}

    def scan(self, document: Document):
        for collection, rows in document.items():
            for row in rows:
                id = record_id(row)
                if id is not None:
                    self.observe(collection, id)

    def observe(self, collection: str, id: int):
        current = self.max_ids.get(collection)
        if current is None or id > current:
            self.max_ids[collection] = id

    def current(self, collection: str) -> int:
        return self.max_ids.get(collection, 0)

    def next_id(self, collection: str) -> int:
        current = self.current(collection)
        if current >= INT64_MAX:
            raise IdExhausted(f"no ids left in {collection}: highest id is {current}")
        id = current + 1
        self.max_ids[collection] = id
        return id
