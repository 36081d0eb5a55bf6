from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, TypeVar

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

COLLECTIONS = ("students", "grades", "attendance", "careers", "general_modules", "payments")


@dataclass
class SnapshotConfig:
    path: Path


class SnapshotStore:
    """Read-only access to a JSON export of the document collections.

    A collection may be exported as a list of documents or as a mapping of
    document id -> document; either way documents come back with an ``id`` key.
    """

    _instance: Optional["SnapshotStore"] = None

    def __init__(self, collections: Optional[dict[str, Any]] = None, path: Optional[Path] = None):
        self._collections = collections or {}
        self.path = path

    @classmethod
    def get_instance(cls, config: SnapshotConfig) -> "SnapshotStore":
        """Shared store per process; asking for a different file reloads it."""
        path = Path(config.path)
        if cls._instance is None or cls._instance.path != path:
            if cls._instance is not None:
                logger.info("Snapshot path changed from %s to %s, reloading", cls._instance.path, path)
            cls._instance = cls.from_file(path)
        return cls._instance

    @classmethod
    def from_file(cls, path: Path) -> "SnapshotStore":
        path = Path(path)
        if not path.exists():
            logger.warning("Snapshot %s not found, starting with empty collections", path)
            return cls({}, path=path)
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        logger.info("Loaded snapshot %s (%s)", path, ", ".join(f"{k}={len(v)}" for k, v in data.items() if k in COLLECTIONS))
        return cls(data, path=path)

    def documents(self, collection: str) -> list[dict[str, Any]]:
        raw = self._collections.get(collection) or []
        if isinstance(raw, dict):
            return [{"id": doc_id, **doc} for doc_id, doc in raw.items()]
        return [dict(doc) for doc in raw]


def load_valid(docs: Iterable[dict[str, Any]], factory: Callable[[dict[str, Any]], T], collection: str) -> list[T]:
    """Build domain records, skipping (and logging) documents rejected at the boundary."""
    out: list[T] = []
    for doc in docs:
        try:
            out.append(factory(doc))
        except ValidationError as e:
            logger.warning("Skipping %s document %s: %s", collection, doc.get("id"), e)
    return out
