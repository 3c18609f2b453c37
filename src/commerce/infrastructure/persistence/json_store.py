"""Shared plumbing for the JSON-file-backed repositories.

Each repository keeps an identity map of the aggregates it handed out or
was given, so the unit of work can find what changed.  An aggregate is
dirty when it is new or has buffered events; every mutating operation
records an event, so nothing else needs to be diffed.
"""

from __future__ import annotations

import json
import os
import tempfile
from abc import abstractmethod
from pathlib import Path
from typing import Generic, TypeVar
from uuid import UUID

from commerce.domain.exceptions import ConcurrencyError
from commerce.domain.model.aggregate import AggregateRoot
from commerce.domain.repository.unit_of_work import ensure_new

A = TypeVar("A", bound=AggregateRoot)


class JsonAggregateStore(Generic[A]):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._tracked: dict[UUID, A] = {}
        self._new: set[UUID] = set()
        self._ensure_file()

    # --- Repository helpers ---------------------------------------------------

    def _get(self, aggregate_id: UUID) -> A | None:
        if aggregate_id in self._tracked:
            return self._tracked[aggregate_id]
        for raw in self._load_raw():
            if raw["id"] == str(aggregate_id):
                aggregate = self._to_domain(raw)
                self._tracked[aggregate_id] = aggregate
                return aggregate
        return None

    def _add(self, aggregate: A) -> None:
        ensure_new(aggregate, self._get(aggregate.id))  # type: ignore[attr-defined]
        self._tracked[aggregate.id] = aggregate  # type: ignore[attr-defined]
        self._new.add(aggregate.id)  # type: ignore[attr-defined]

    # --- Unit of work hooks ---------------------------------------------------

    def dirty(self) -> list[A]:
        return [
            a
            for a in self._tracked.values()
            if a.id in self._new or a.pending_events  # type: ignore[attr-defined]
        ]

    def stage(self) -> tuple[list[dict], list[A]]:
        """Check versions and build the records to write.

        Raises ConcurrencyError if a stored record moved on since it was
        loaded.  Nothing is written here.
        """
        dirty = self.dirty()
        records = self._load_raw()
        index = {raw["id"]: i for i, raw in enumerate(records)}

        for aggregate in dirty:
            key = str(aggregate.id)  # type: ignore[attr-defined]
            is_new = aggregate.id in self._new  # type: ignore[attr-defined]
            if is_new and key in index:
                raise ConcurrencyError(
                    f"{type(aggregate).__name__} {key} was created concurrently"
                )
            if not is_new:
                stored_version = records[index[key]]["version"] if key in index else None
                if stored_version != aggregate.version:  # type: ignore[attr-defined]
                    raise ConcurrencyError(
                        f"{type(aggregate).__name__} {key} was modified concurrently "
                        f"(loaded v{aggregate.version}, stored v{stored_version})"  # type: ignore[attr-defined]
                    )
            self._check_unique(aggregate, records)

            raw = self._to_raw(aggregate)
            raw["version"] = aggregate.version + 1  # type: ignore[attr-defined]
            if key in index:
                records[index[key]] = raw
            else:
                index[key] = len(records)
                records.append(raw)
        return records, dirty

    def write_temp(self, records: list[dict]) -> Path:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._file_path.name}.", dir=self._file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(records, indent=2) + "\n")
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return Path(tmp_name)

    def publish_temp(self, tmp_path: Path) -> None:
        os.replace(tmp_path, self._file_path)

    def clear(self) -> None:
        self._tracked.clear()
        self._new.clear()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    @abstractmethod
    def _to_raw(aggregate: A) -> dict:
        """Map an aggregate to a JSON-ready dict."""

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> A:
        """Rebuild an aggregate from its stored dict."""

    def _check_unique(self, aggregate: A, records: list[dict]) -> None:
        """Hook for stores with extra uniqueness rules."""

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
