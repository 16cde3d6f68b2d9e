from typing import Any

from backoffice.core.service import ResourceService, to_payload, unwrap
from backoffice.modules.transactions.schemas import PeriodQuery


class AccountingService(ResourceService):
    """Отчёты только на чтение, CRUD базового класса здесь не используется."""

    path = "/accounting"

    async def daily_report(self, date: str | None = None) -> Any:
        resp = await self.dispatcher.get(self._url("reports", "daily"), params=to_payload({"date": date}))
        return unwrap(resp)

    async def monthly_report(self, year: int | None = None, month: int | None = None) -> Any:
        params = to_payload({"year": year, "month": month})
        resp = await self.dispatcher.get(self._url("reports", "monthly"), params=params)
        return unwrap(resp)

    async def yearly_report(self, year: int | None = None) -> Any:
        resp = await self.dispatcher.get(self._url("reports", "yearly"), params=to_payload({"year": year}))
        return unwrap(resp)

    async def profit_loss(self, start_date: str | None = None, end_date: str | None = None) -> Any:
        query = PeriodQuery(start_date=start_date, end_date=end_date)
        resp = await self.dispatcher.get(self._url("profit-loss"), params=to_payload(query))
        return unwrap(resp)

    async def stock_report(self) -> Any:
        resp = await self.dispatcher.get(self._url("stock-report"))
        return unwrap(resp)
