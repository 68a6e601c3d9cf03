import copy
import logging
from pathlib import Path
from typing import Any, List, Set, Tuple

from ..errors import BadRequest, CodecError, IOFailure, LoadError, NotFound, SerializationFailure
from . import codec
from .allocator import IdAllocator
from .guard import ReadWriteLock
from .record_store import Document, Record, RecordStore

logger = logging.getLogger("qrest")


def _validate_document(doc: Any) -> Document:
    if not isinstance(doc, dict):
        raise LoadError("top-level JSON value must be an object of collections")
    for name, rows in doc.items():
        if not isinstance(rows, list):
            raise LoadError(f"collection {name!r} must be an array")
        for row in rows:
            if not isinstance(row, dict):
                raise LoadError(f"collection {name!r} holds a non-object record")
    return doc


class Database:
    """
    The record store plus everything needed to mutate and persist it safely:
    identifier allocation, the read/write guard and the dirty flag.

    Every method returns copies; nothing handed out aliases the live document.
    """

    def __init__(self, path: Path, document: Document = None):
        self.path = Path(path)
        self.store = RecordStore(document if document is not None else {})
        self.allocator = IdAllocator()
        self.allocator.scan(self.store.document)
        self.lock = ReadWriteLock()
        self._dirty = False

    @classmethod
    def load(cls, path) -> "Database":
        p = Path(path)
        try:
            raw = p.read_bytes()
        except OSError as e:
            raise LoadError(f"cannot read {p}: {e}") from e
        try:
            doc = codec.decode(raw)
        except CodecError as e:
            raise LoadError(f"{p}: {e}") from e
        db = cls(p, _validate_document(doc))
        logger.info("Loaded %d collection(s) from %s", len(db.store.document), p)
        return db

    @property
    def dirty(self) -> bool:
        return self._dirty

    # -----------------------------
    # Reads (shared access)
    # -----------------------------
    def collections(self) -> Set[str]:
        with self.lock.read():
            return self.store.collections()

    def list(self, collection: str) -> List[Record]:
        with self.lock.read():
            return copy.deepcopy(self.store.list(collection))

    def get(self, collection: str, id: int) -> Record:
        with self.lock.read():
            return copy.deepcopy(self.store.get(collection, id))

    def document(self) -> Document:
        with self.lock.read():
            return copy.deepcopy(self.store.snapshot())

    # -----------------------------
    # Writes (exclusive access)
    # -----------------------------
    def create(self, collection: str, payload: Record) -> Record:
        """Insert a new record; any client-supplied id is replaced."""
        record = copy.deepcopy(payload)
        record.pop("id", None)
        with self.lock.write():
            record = {"id": self.allocator.next_id(collection), **record}
            self.store.insert(collection, record)
            self._dirty = True
            return copy.deepcopy(record)

    def put(self, collection: str, id: int, payload: Record) -> Tuple[Record, bool]:
        """Replace the record with this id, or create it. Returns (record, created)."""
        if not codec.INT64_MIN <= id <= codec.INT64_MAX:
            raise BadRequest(f"id out of 64-bit range: {id}")
        record = copy.deepcopy(payload)
        record.pop("id", None)
        record = {"id": id, **record}
        with self.lock.write():
            try:
                stored = self.store.update(collection, id, record, replace=True)
                created = False
            except NotFound:
                stored = self.store.insert(collection, record)
                created = True
            self.allocator.observe(collection, id)
            self._dirty = True
            return copy.deepcopy(stored), created

    def patch(self, collection: str, id: int, payload: Record) -> Record:
        fields = copy.deepcopy(payload)
        fields.pop("id", None)
        with self.lock.write():
            stored = self.store.update(collection, id, fields, replace=False)
            self._dirty = True
            return copy.deepcopy(stored)

    def delete(self, collection: str, id: int) -> Record:
        with self.lock.write():
            removed = self.store.delete(collection, id)
            self._dirty = True
            return removed

    # -----------------------------
    # Persistence
    # -----------------------------
    def _mark_dirty(self):
        with self.lock.write():
            self._dirty = True

    def flush(self) -> bool:
        """
        Write a snapshot to the backing file if the document changed since the
        last one. Returns True when bytes were written.

        The flag is cleared before the snapshot is taken, so a mutation that
        lands after that point leaves it set for the next cycle. On
        SerializationFailure or IOFailure the flag is restored before raising.
        """
        with self.lock.write():
            if not self._dirty:
                return False
            self._dirty = False

        try:
            with self.lock.read():
                data = codec.encode(self.store.snapshot(), pretty=True)
        except CodecError as e:
            self._mark_dirty()
            raise SerializationFailure(str(e)) from e

        try:
            with self.path.open("w", encoding="utf-8") as f:
                f.write(data)
        except OSError as e:
            self._mark_dirty()
            raise IOFailure(str(e)) from e

        logger.info("Flushed snapshot to %s", self.path)
        return True
