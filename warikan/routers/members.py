# warikan/routers/members.py
# -----------------------------------------------------------------------------
# РОУТЕР: Участники
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from warikan.schemas.member import MemberCreate, MemberOut
from warikan.services.ledger import LedgerStore
from warikan.store import get_ledger
from warikan.utils.errors import DuplicateMemberError, LedgerError

router = APIRouter()


def _members_out(members) -> List[MemberOut]:
    return [MemberOut(name=m, position=idx) for idx, m in enumerate(members)]


@router.get("/", response_model=List[MemberOut])
def list_members(ledger: LedgerStore = Depends(get_ledger)):
    return _members_out(ledger.snapshot().members)


@router.post("/", response_model=List[MemberOut], status_code=status.HTTP_201_CREATED)
def add_member(payload: MemberCreate, ledger: LedgerStore = Depends(get_ledger)):
    """Добавляет участника и возвращает актуальный список."""
    try:
        snap = ledger.add_member(payload.name)
    except DuplicateMemberError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.as_detail())
    except LedgerError as e:
        raise HTTPException(status_code=422, detail=e.as_detail())
    return _members_out(snap.members)
