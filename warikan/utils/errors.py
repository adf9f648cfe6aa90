# warikan/utils/errors.py
# -----------------------------------------------------------------------------
# ОШИБКИ РАСЧЁТА И ЛЕДЖЕРА
# -----------------------------------------------------------------------------
# Две независимые ветки:
#   • SettlementValidationError - плохие входные данные (показываем пользователю).
#   • SettlementInvariantError  - баг в расчёте (нарушен нулевой баланс и т.п.).
#     Наследуется от AssertionError и НЕ перехватывается роутерами.
# Ошибки хранилища (LedgerError) - отдельная ветка для операций добавления/удаления.
# -----------------------------------------------------------------------------

from __future__ import annotations


class SettlementValidationError(ValueError):
    """Базовая ошибка валидации входа для settle-up."""

    code = "invalid_input"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def as_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class InvalidMemberError(SettlementValidationError):
    code = "invalid_member"


class EmptyMemberSetError(SettlementValidationError):
    code = "empty_member_set"


class InvalidAmountError(SettlementValidationError):
    code = "invalid_amount"


class NegativeAmountError(InvalidAmountError):
    code = "negative_amount"


class EmptyDescriptionError(SettlementValidationError):
    code = "empty_description"


class InvalidExpenseError(SettlementValidationError):
    code = "invalid_expense"


class SettlementInvariantError(AssertionError):
    """Внутренний дефект алгоритма: сумма балансов != 0 или план не сведён."""


# =========================
# ХРАНИЛИЩЕ (LedgerStore)
# =========================

class LedgerError(ValueError):
    code = "ledger_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def as_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class EmptyMemberNameError(LedgerError):
    code = "empty_member_name"


class DuplicateMemberError(LedgerError):
    code = "duplicate_member"


class UnknownPayerError(LedgerError):
    code = "unknown_payer"


class ExpenseNotFoundError(LedgerError):
    code = "expense_not_found"
