# warikan/routers/expenses.py
# -----------------------------------------------------------------------------
# РОУТЕР: Расходы
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from starlette import status

from warikan.schemas.expense import ExpenseCreate, ExpenseOut
from warikan.services.ledger import LedgerStore
from warikan.store import get_ledger
from warikan.utils.errors import ExpenseNotFoundError, LedgerError, SettlementValidationError

router = APIRouter()


def _expenses_out(expenses) -> List[ExpenseOut]:
    return [
        ExpenseOut(index=idx, paid_by=e.paid_by, description=e.description, amount=e.amount)
        for idx, e in enumerate(expenses)
    ]


@router.get("/", response_model=List[ExpenseOut])
def list_expenses(ledger: LedgerStore = Depends(get_ledger)):
    return _expenses_out(ledger.snapshot().expenses)


@router.post("/", response_model=ExpenseOut, status_code=status.HTTP_201_CREATED)
def add_expense(payload: ExpenseCreate, ledger: LedgerStore = Depends(get_ledger)):
    try:
        snap = ledger.add_expense(payload.paid_by, payload.description, payload.amount)
    except (LedgerError, SettlementValidationError) as e:
        raise HTTPException(status_code=422, detail=e.as_detail())
    return _expenses_out(snap.expenses)[-1]


@router.delete("/{index}", status_code=status.HTTP_204_NO_CONTENT)
def remove_expense(index: int, ledger: LedgerStore = Depends(get_ledger)):
    try:
        ledger.remove_expense(index)
    except ExpenseNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.as_detail())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
