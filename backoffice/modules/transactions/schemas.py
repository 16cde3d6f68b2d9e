from typing import Literal

from pydantic import Field

from backoffice.core.schemas import PaginationParams, QueryModel


TransactionType = Literal["income", "expense"]
TransactionCategory = Literal["sale", "purchase", "return", "damage", "salary", "rent", "utility", "other"]


class TransactionQuery(PaginationParams):
    type: TransactionType | None = None
    category: TransactionCategory | None = None
    start_date: str | None = None
    end_date: str | None = None
    status: Literal["completed", "pending", "cancelled"] | None = None


class TransactionIn(QueryModel):
    type: TransactionType | None = None
    category: TransactionCategory | None = None
    amount: float | None = Field(None, gt=0)
    description: str | None = None
    date: str | None = None
    payment_method: str | None = None
    status: Literal["completed", "pending", "cancelled"] | None = None


class PeriodQuery(QueryModel):
    start_date: str | None = None
    end_date: str | None = None
