from typing import Any, Dict, List, Optional, Set

from ..errors import NotFound

Record = Dict[str, Any]
Document = Dict[str, List[Record]]


def record_id(record: Any) -> Optional[int]:
    """Return the integer ``id`` of a record, or None if it has none."""
    if not isinstance(record, dict):
        return None
    value = record.get("id")
    # bool is an int subclass; true/false are not identifiers
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class RecordStore:
    """In-memory collections: collection name -> ordered list of records.

    Not synchronized; callers hold the database guard.
    """

    def __init__(self, document: Optional[Document] = None):
        self.document: Document = document if document is not None else {}

    def collections(self) -> Set[str]:
        return set(self.document)

    def _rows(self, collection: str) -> List[Record]:
        rows = self.document.get(collection)
        if rows is None:
            raise NotFound(f"unknown collection: {collection}")
        return rows

    def _index(self, collection: str, id: int) -> int:
        for i, row in enumerate(self._rows(collection)):
            if record_id(row) == id:
                return i
        raise NotFound(f"no record with id {id} in {collection}")

    def list(self, collection: str) -> List[Record]:
        return self._rows(collection)

    def get(self, collection: str, id: int) -> Record:
        return self._rows(collection)[self._index(collection, id)]

    def insert(self, collection: str, record: Record) -> Record:
        self.document.setdefault(collection, []).append(record)
        return record

    def update(self, collection: str, id: int, patch: Record, replace: bool = False) -> Record:
        record = self.get(collection, id)
        if replace:
            record.clear()
        record.update(patch)
        return record

    def delete(self, collection: str, id: int) -> Record:
        index = self._index(collection, id)
        return self.document[collection].pop(index)

    def snapshot(self) -> Document:
        return self.document
