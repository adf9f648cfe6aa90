# warikan/services/ledger.py
# -----------------------------------------------------------------------------
# ХРАНИЛИЩЕ ЛЕДЖЕРА (в памяти процесса, без БД)
# -----------------------------------------------------------------------------
# Что делает этот модуль:
#   • Держит участников (в порядке добавления) и расходы группы.
#   • Любое изменение - copy-on-write под локом: создаётся НОВЫЙ LedgerSnapshot
#     с version + 1. Читатели получают неизменяемый снимок и считают по нему.
#   • Валидация как в форме ввода: имя обрезается и должно быть уникальным,
#     описание обрезается, плательщик - существующий участник, сумма - целое > 0.
# -----------------------------------------------------------------------------

from __future__ import annotations

import threading
from typing import Any, Optional

from warikan.models.ledger import Expense, LedgerSnapshot
from warikan.services.events import (
    EXPENSE_ADDED,
    EXPENSE_REMOVED,
    LEDGER_RESET,
    MEMBER_ADDED,
    log_event,
)
from warikan.utils.errors import (
    DuplicateMemberError,
    EmptyDescriptionError,
    EmptyMemberNameError,
    ExpenseNotFoundError,
    InvalidAmountError,
    UnknownPayerError,
)


class LedgerStore:
    def __init__(self, snapshot: Optional[LedgerSnapshot] = None):
        self._lock = threading.Lock()
        self._snapshot = snapshot or LedgerSnapshot()

    def snapshot(self) -> LedgerSnapshot:
        # ссылка на frozen-объект: атомарна, лок не нужен
        return self._snapshot

    # ===== Участники =========================================================

    def add_member(self, name: str) -> LedgerSnapshot:
        trimmed = (name or "").strip()
        if not trimmed:
            raise EmptyMemberNameError("Имя участника не может быть пустым")

        with self._lock:
            current = self._snapshot
            if trimmed in current.members:
                raise DuplicateMemberError(f"Участник {trimmed!r} уже добавлен")
            self._snapshot = LedgerSnapshot(
                version=current.version + 1,
                members=current.members + (trimmed,),
                expenses=current.expenses,
            )
            snap = self._snapshot

        log_event(type=MEMBER_ADDED, version=snap.version, data={"member": trimmed})
        return snap

    # ===== Расходы ===========================================================

    def add_expense(self, paid_by: str, description: str, amount: Any) -> LedgerSnapshot:
        trimmed = (description or "").strip()
        if not trimmed:
            raise EmptyDescriptionError("Описание расхода не может быть пустым")
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidAmountError(f"Сумма должна быть целым положительным числом: {amount!r}")

        expense = Expense(paid_by=paid_by, description=trimmed, amount=amount)
        with self._lock:
            current = self._snapshot
            if paid_by not in current.members:
                raise UnknownPayerError(f"Плательщик {paid_by!r} не является участником")
            self._snapshot = LedgerSnapshot(
                version=current.version + 1,
                members=current.members,
                expenses=current.expenses + (expense,),
            )
            snap = self._snapshot

        log_event(
            type=EXPENSE_ADDED,
            version=snap.version,
            data={"index": len(snap.expenses) - 1, "paid_by": paid_by, "amount": amount},
        )
        return snap

    def remove_expense(self, index: int) -> LedgerSnapshot:
        with self._lock:
            current = self._snapshot
            if index < 0 or index >= len(current.expenses):
                raise ExpenseNotFoundError(f"Расход #{index} не найден")
            removed = current.expenses[index]
            self._snapshot = LedgerSnapshot(
                version=current.version + 1,
                members=current.members,
                expenses=current.expenses[:index] + current.expenses[index + 1:],
            )
            snap = self._snapshot

        log_event(
            type=EXPENSE_REMOVED,
            version=snap.version,
            data={"index": index, "paid_by": removed.paid_by, "amount": removed.amount},
        )
        return snap

    def reset(self) -> LedgerSnapshot:
        with self._lock:
            self._snapshot = LedgerSnapshot(version=self._snapshot.version + 1)
            snap = self._snapshot

        log_event(type=LEDGER_RESET, version=snap.version)
        return snap
