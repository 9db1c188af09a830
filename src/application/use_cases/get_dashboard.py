"""Get Dashboard Use Case."""

from src.core.entities.report import DashboardSummary
from src.core.interfaces import IRecordStore
from src.core.services.dashboard import build_dashboard


class GetDashboardUseCase:
    """Headline counters over all three collections."""

    def __init__(self, record_store: IRecordStore | None = None):
        self._record_store = record_store

    async def _get_record_store(self) -> IRecordStore:
        if self._record_store is None:
            from src.infrastructure.storage.sqlite import get_record_store

            self._record_store = await get_record_store()
        return self._record_store

    async def execute(self) -> DashboardSummary:
        store = await self._get_record_store()
        return build_dashboard(
            await store.get_customers(),
            await store.get_orders(),
            await store.get_invoices(),
        )
