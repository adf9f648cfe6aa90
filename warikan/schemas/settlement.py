# warikan/schemas/settlement.py

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .expense import ExpenseBase


class SettlementOut(BaseModel):
    """
    Схема ответа для settle-up (жадного алгоритма оптимизации переводов).
    Один перевод плана: должник -> кредитор.
    """
    model_config = ConfigDict(from_attributes=True)

    from_member: str  # кто должен совершить перевод (должник)
    to_member: str    # кому перевод предназначен (кредитор)
    amount: int       # сумма перевода (>0, целые минимальные единицы)


class SettlePlanOut(BaseModel):
    version: int = Field(..., description="Версия снимка леджера, по которому посчитан план")
    transfers: List[SettlementOut]


class MemberBalanceOut(BaseModel):
    member: str
    paid: int = Field(..., description="Сколько участник заплатил всего")
    fair_share: int = Field(..., description="Сколько должен был заплатить (равная доля)")
    balance: int = Field(..., description="> 0 - участнику должны; < 0 - он должен")


class BalanceReportOut(BaseModel):
    version: int
    total: int
    members: List[MemberBalanceOut]


class SettlementRequest(BaseModel):
    """Вход для stateless-расчёта: полный снимок участников и расходов."""
    members: List[str] = Field(default_factory=list, description="Участники в порядке добавления")
    expenses: List[ExpenseBase] = Field(default_factory=list)
