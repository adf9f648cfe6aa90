# warikan/services/events.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

# Типы событий леджера (используй в сервисах)
MEMBER_ADDED = "member_added"

EXPENSE_ADDED = "expense_added"
EXPENSE_REMOVED = "expense_removed"

LEDGER_RESET = "ledger_reset"


def log_event(
    *,
    type: str,
    version: int,
    data: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Единая точка записи событий леджера. Пишем в лог (хранения нет),
    version - версия снимка ПОСЛЕ изменения.
    """
    payload = {
        "type": type,
        "version": version,
        "data": (data or {}),
    }
    log.info("ledger event %s v%s %s", type, version, payload["data"])
    return payload
