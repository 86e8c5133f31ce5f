"""Prediction persistence stores."""

import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from loguru import logger

from climate_intel.core.exceptions import ProviderError
from climate_intel.core.models import Prediction, StoredPrediction

DEFAULT_MAX_RECORDS = 1000


class PersistenceStore(ABC):
    """Keeps prediction summaries. No durability guarantees are implied."""

    @abstractmethod
    def save(self, prediction: Prediction) -> str:
        ...

    @abstractmethod
    def get(self, prediction_id: str) -> Optional[StoredPrediction]:
        ...

    @abstractmethod
    def recent(self, region: Optional[str] = None, limit: int = 20) -> list:
        ...


class InMemoryStore(PersistenceStore):
    """Dict-backed store; safe to share across request threads.

    Holds at most ``max_records`` summaries, evicting the oldest by
    ``created_at``. ``None`` disables the cap.
    """

    def __init__(self, max_records: Optional[int] = DEFAULT_MAX_RECORDS):
        if max_records is not None and max_records < 1:
            raise ValueError(f"max_records must be positive, got {max_records}")
        self.max_records = max_records
        self._records: dict = {}
        self._lock = threading.Lock()

    def _add(self, record: StoredPrediction):
        # Caller holds the lock
        self._records[record.prediction_id] = record
        if self.max_records is None:
            return
        overflow = len(self._records) - self.max_records
        if overflow > 0:
            oldest = sorted(self._records.values(), key=lambda r: r.created_at)[:overflow]
            for r in oldest:
                del self._records[r.prediction_id]
            logger.debug(f"Evicted {overflow} stored predictions")

    def save(self, prediction: Prediction) -> str:
        record = StoredPrediction.from_prediction(prediction)
        with self._lock:
            self._add(record)
        logger.debug(f"Stored prediction {record.prediction_id}")
        return record.prediction_id

    def get(self, prediction_id: str) -> Optional[StoredPrediction]:
        with self._lock:
            return self._records.get(prediction_id)

    def recent(self, region: Optional[str] = None, limit: int = 20) -> list:
        with self._lock:
            records = list(self._records.values())
        if region:
            records = [r for r in records if r.region == region]
        records.sort(key=lambda r: r.created_at, reverse=True)
        return records[:limit]

    def __len__(self):
        with self._lock:
            return len(self._records)


class JsonFileStore(InMemoryStore):
    """In-memory store mirrored to a JSON file after every write."""

    def __init__(self, path, max_records: Optional[int] = DEFAULT_MAX_RECORDS):
        super().__init__(max_records)
        self.path = Path(path)
        self._load()

    def _load(self):
        if not self.path.exists():
            return
        try:
            with open(self.path) as f:
                rows = json.load(f)
        except (OSError, ValueError) as e:
            raise ProviderError("json_store", f"cannot read {self.path}: {e}") from e
        with self._lock:
            for row in rows:
                self._add(StoredPrediction(**row))
        logger.info(f"Loaded {len(self)} stored predictions from {self.path}")

    def _flush(self):
        # Caller holds the lock; the file is swapped in whole
        rows = [r.to_dict() for r in self._records.values()]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(rows, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def save(self, prediction: Prediction) -> str:
        record = StoredPrediction.from_prediction(prediction)
        with self._lock:
            self._add(record)
            self._flush()
        logger.debug(f"Stored prediction {record.prediction_id} in {self.path}")
        return record.prediction_id


def create_store(
    backend: str = "memory",
    path: Optional[str] = None,
    max_records: Optional[int] = DEFAULT_MAX_RECORDS,
) -> PersistenceStore:
    if backend == "json":
        return JsonFileStore(path or "data/predictions.json", max_records)
    if backend == "memory":
        return InMemoryStore(max_records)
    raise ValueError(f"Unknown storage backend: {backend}")
