# warikan/routers/settlement.py
# -----------------------------------------------------------------------------
# РОУТЕР: Балансы / Settle-up
# -----------------------------------------------------------------------------
# Всегда считаем по ОДНОМУ снимку леджера (version в ответе).
# SettlementInvariantError здесь НЕ ловим: это баг, пусть будет 500.
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from warikan.schemas.settlement import (
    BalanceReportOut,
    SettlementOut,
    SettlementRequest,
    SettlePlanOut,
)
from warikan.services.ledger import LedgerStore
from warikan.store import get_ledger
from warikan.utils.balance import build_balance_report, compute_settlement
from warikan.utils.errors import SettlementValidationError

router = APIRouter()


@router.get("/balances", response_model=BalanceReportOut)
def get_balances(ledger: LedgerStore = Depends(get_ledger)):
    snap = ledger.snapshot()
    try:
        report = build_balance_report(snap.members, snap.expenses)
    except SettlementValidationError as e:
        raise HTTPException(status_code=422, detail=e.as_detail())
    return {"version": snap.version, **report}


@router.get("/settle-up", response_model=SettlePlanOut)
def get_settle_up(ledger: LedgerStore = Depends(get_ledger)):
    """
    План взаиморасчётов (settle-up) по текущему снимку.
    Нет участников или расходов - пустой список переводов.
    """
    snap = ledger.snapshot()
    try:
        plan = compute_settlement(snap.members, snap.expenses)
    except SettlementValidationError as e:
        raise HTTPException(status_code=422, detail=e.as_detail())
    return {"version": snap.version, "transfers": [t.as_dict() for t in plan]}


@router.post("/compute", response_model=List[SettlementOut])
def compute(payload: SettlementRequest):
    """Stateless-расчёт: участники и расходы приходят в теле запроса целиком."""
    try:
        plan = compute_settlement(payload.members, payload.expenses)
    except SettlementValidationError as e:
        raise HTTPException(status_code=422, detail=e.as_detail())
    return [t.as_dict() for t in plan]
