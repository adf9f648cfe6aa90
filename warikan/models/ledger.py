# warikan/models/ledger.py
# -----------------------------------------------------------------------------
# МОДЕЛИ ЛЕДЖЕРА (неизменяемые значения, без БД)
# -----------------------------------------------------------------------------
# Суммы - int в минимальных единицах валюты (копейки/иены). Никаких float.
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Expense:
    paid_by: str       # кто заплатил за всю группу
    description: str   # на что (уже обрезано по пробелам)
    amount: int        # сумма, >= 0, целые минимальные единицы


@dataclass(frozen=True)
class SettlementTransfer:
    from_member: str   # должник
    to_member: str     # кредитор
    amount: int        # > 0

    def as_dict(self) -> dict:
        return {"from_member": self.from_member, "to_member": self.to_member, "amount": self.amount}


@dataclass(frozen=True)
class LedgerSnapshot:
    """
    Снимок состояния леджера. Расчёт всегда идёт по одному снимку,
    поэтому не видит «наполовину обновлённых» коллекций.
    """
    version: int = 0
    members: Tuple[str, ...] = field(default_factory=tuple)
    expenses: Tuple[Expense, ...] = field(default_factory=tuple)
