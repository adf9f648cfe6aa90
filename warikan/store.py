# warikan/store.py
# Инициализация хранилища леджера: один экземпляр на процесс + зависимость FastAPI.

from __future__ import annotations

from warikan.services.ledger import LedgerStore

ledger_store = LedgerStore()


def get_ledger() -> LedgerStore:
    return ledger_store
