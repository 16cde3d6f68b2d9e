from typing import Any

from backoffice.core.service import ResourceService, to_payload, unwrap
from backoffice.modules.transactions.schemas import PeriodQuery


class TransactionService(ResourceService):
    path = "/transactions"

    async def summary(self, start_date: str | None = None, end_date: str | None = None) -> Any:
        query = PeriodQuery(start_date=start_date, end_date=end_date)
        resp = await self.dispatcher.get(self._url("summary"), params=to_payload(query))
        return unwrap(resp)
