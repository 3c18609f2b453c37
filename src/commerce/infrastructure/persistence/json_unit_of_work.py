"""JSON-file-backed UnitOfWork.

All three stores are staged (version checks, record building) before any
file is touched.  Files are then written to temp files and swapped in
with ``os.replace``.  A failure while staging or writing temp files
leaves every file as it was.  Each swap is atomic on its own, but a
failure between two swaps leaves the earlier files updated.  Leftover
temp files are removed either way.

There is no lock between processes: version checks catch a conflicting
writer only if it finished before ``stage()`` read the file.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from commerce.domain.model.aggregate import AggregateRoot
from commerce.domain.repository.unit_of_work import UnitOfWork
from commerce.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from commerce.infrastructure.persistence.json_payment_repository import (
    JsonPaymentRepository,
)
from commerce.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = structlog.get_logger(__name__)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, data_dir: Path) -> None:
        super().__init__()
        self.products = JsonProductRepository(data_dir / "products.json")
        self.orders = JsonOrderRepository(data_dir / "orders.json")
        self.payments = JsonPaymentRepository(data_dir / "payments.json")
        self._stores = (self.products, self.orders, self.payments)

    def _commit(self) -> list[AggregateRoot]:
        staged = [(store, *store.stage()) for store in self._stores]
        staged = [(store, records, dirty) for store, records, dirty in staged if dirty]

        temp_files = []
        swapped = 0
        try:
            for store, records, _ in staged:
                temp_files.append((store, store.write_temp(records)))
            for store, tmp in temp_files:
                store.publish_temp(tmp)
                swapped += 1
        except OSError:
            for _, tmp in temp_files:
                tmp.unlink(missing_ok=True)
            logger.error("uow.commit_failed", files_swapped=swapped, files=len(staged))
            raise

        written: list[AggregateRoot] = []
        for _, _, dirty in staged:
            for aggregate in dirty:
                aggregate.version += 1  # type: ignore[attr-defined]
                written.append(aggregate)

        logger.info("uow.committed", aggregates=len(written))
        return written

    def _discard(self) -> None:
        for store in self._stores:
            store.clear()
