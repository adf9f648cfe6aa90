"""Tests for request/response schemas."""

import warnings

import pytest
from pydantic import ValidationError

from warikan.models.ledger import Expense, SettlementTransfer
from warikan.schemas.expense import ExpenseBase, ExpenseOut
from warikan.schemas.settlement import SettlementOut


def test_expense_description_is_trimmed():
    assert ExpenseBase(paid_by="A", description="  taxi ", amount=10).description == "taxi"


@pytest.mark.parametrize("amount", [10.5, "100", True])
def test_expense_amount_is_strict_int(amount):
    with pytest.raises(ValidationError):
        ExpenseBase(paid_by="A", description="taxi", amount=amount)


def test_settlement_out_reads_attributes():
    out = SettlementOut.model_validate(SettlementTransfer(from_member="B", to_member="A", amount=5))
    assert out.model_dump() == {"from_member": "B", "to_member": "A", "amount": 5}


def test_schemas_validate_without_deprecation_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        ExpenseBase(paid_by="A", description=" taxi ", amount=10)
        SettlementOut.model_validate(SettlementTransfer(from_member="B", to_member="A", amount=5))
        ExpenseOut.model_validate(
            {"index": 0, **vars(Expense(paid_by="A", description="taxi", amount=10))}
        )
