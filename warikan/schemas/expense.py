# warikan/schemas/expense.py
# -----------------------------------------------------------------------------
# СХЕМЫ Pydantic: Expense
# -----------------------------------------------------------------------------
# Суммы - StrictInt в минимальных единицах валюты: 10.5 / "100" / true не принимаем.
# Границы (>= 0 / > 0) проверяются в сервисном слое, чтобы ошибки имели наш code.
# -----------------------------------------------------------------------------

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class ExpenseBase(BaseModel):
    paid_by: str = Field(..., description="Кто заплатил за всю группу")
    description: str = Field(..., description="На что потрачено")
    amount: StrictInt = Field(..., description="Сумма в минимальных единицах валюты")

    @field_validator("description")
    @classmethod
    def _strip_description(cls, v: str) -> str:
        return v.strip()


class ExpenseCreate(ExpenseBase):
    pass


class ExpenseOut(ExpenseBase):
    model_config = ConfigDict(from_attributes=True)

    index: int = Field(..., description="Позиция в списке расходов (для удаления)")
