# warikan/utils/balance.py
# -----------------------------------------------------------------------------
# УТИЛИТЫ РАСЧЁТА БАЛАНСОВ / SETTLE-UP
# -----------------------------------------------------------------------------
# Политика:
#   • Каждый расход оплачен ОДНИМ участником за всю группу, делится поровну на всех.
#   • Все суммы - int в минимальных единицах валюты. Ни float, ни округлений.
#   • Порядок участников (канонический):
#       - упорядоченный вход (list/tuple/dict/...) - порядок вызывающего,
#         дубликаты схлопываются, остаётся первое вхождение;
#       - set/frozenset - сортировка по строке (порядок set в Python не воспроизводим).
#     Этот порядок решает, КТО берёт на себя остаток от деления (первые `remainder`
#     участников платят на 1 единицу больше) и как разрешаются ничьи в greedy.
#   • Семантика net:
#       net > 0 - участнику ДОЛЖНЫ (переплатил); net < 0 - он ДОЛЖЕН.
#   • Алгоритм settle-up: "greedy" - крупнейший кредитор против крупнейшего должника.
#     Глобальный минимум переводов НЕ гарантируется (задача NP-трудная), на практике близко.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from warikan.models.ledger import SettlementTransfer
from warikan.utils.errors import (
    EmptyDescriptionError,
    EmptyMemberSetError,
    InvalidAmountError,
    InvalidExpenseError,
    InvalidMemberError,
    NegativeAmountError,
    SettlementInvariantError,
)

log = logging.getLogger(__name__)


# =========================
# ВСПОМОГАТЕЛЬНОЕ
# =========================

def normalize_members(members: Iterable[str]) -> List[str]:
    """Канонический порядок участников (см. политику в шапке модуля)."""
    if isinstance(members, (set, frozenset)):
        ordered = sorted(members)
    else:
        ordered = list(dict.fromkeys(members))

    for member in ordered:
        if not isinstance(member, str) or not member.strip():
            raise InvalidMemberError(f"Некорректный участник: {member!r}")
        # "A" и "A " иначе стали бы двумя разными участниками
        if member != member.strip():
            raise InvalidMemberError(f"Имя участника должно быть без пробелов по краям: {member!r}")
    return ordered


def _check_amount(amount: Any) -> int:
    # bool - подкласс int, но суммой не является
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmountError(f"Сумма должна быть целым числом минимальных единиц: {amount!r}")
    if amount < 0:
        raise NegativeAmountError(f"Сумма не может быть отрицательной: {amount}")
    return amount


_EXPENSE_FIELDS = ("paid_by", "description", "amount")


def _field(expense: Any, name: str) -> Any:
    # расход - объект с атрибутами (Expense, pydantic) или dict с теми же ключами
    if isinstance(expense, Mapping):
        return expense[name]
    return getattr(expense, name)


def _check_record(idx: int, expense: Any) -> None:
    if isinstance(expense, Mapping):
        missing = [f for f in _EXPENSE_FIELDS if f not in expense]
    else:
        missing = [f for f in _EXPENSE_FIELDS if not hasattr(expense, f)]
    if missing:
        raise InvalidExpenseError(
            f"Расход #{idx}: нет полей {', '.join(missing)} (ожидаются {', '.join(_EXPENSE_FIELDS)})"
        )


def validate_expenses(members: Sequence[str], expenses: Sequence[Any]) -> None:
    """
    Перепроверка входа (UI уже валидирует, но считать по «грязным» данным нельзя).
    Ни один расход не отбрасывается молча - ошибка на весь расчёт.
    """
    if expenses and not members:
        raise EmptyMemberSetError("Нет участников, а расходы есть - делить не на кого")

    known = set(members)
    for idx, expense in enumerate(expenses):
        _check_record(idx, expense)
        payer = _field(expense, "paid_by")
        if payer not in known:
            raise InvalidMemberError(f"Расход #{idx}: плательщик {payer!r} не является участником")
        _check_amount(_field(expense, "amount"))
        description = _field(expense, "description")
        if not isinstance(description, str) or not description.strip():
            raise EmptyDescriptionError(f"Расход #{idx}: пустое описание")


# =========================
# 1) СУММЫ ПО ПЛАТЕЛЬЩИКАМ
# =========================

def calculate_total_paid_by_member(expenses: Iterable[Any]) -> Dict[str, int]:
    """
    Сколько каждый заплатил в сумме. Кто не платил - отсутствует в словаре
    (дальше трактуется как 0).
    """
    paid: Dict[str, int] = {}
    for expense in expenses:
        payer = _field(expense, "paid_by")
        paid[payer] = paid.get(payer, 0) + _field(expense, "amount")
    return paid


def calculate_total(paid_by_member: Dict[str, int]) -> int:
    return sum(paid_by_member.values(), 0)


# =========================
# 2) СПРАВЕДЛИВЫЕ ДОЛИ
# =========================

def calculate_fair_shares(total: int, members: Sequence[str]) -> Dict[str, int]:
    """
    Делит total поровну. Остаток раздаётся по 1 единице первым `remainder`
    участникам в каноническом порядке, так что сумма долей == total ровно,
    а любые две доли отличаются не более чем на 1.
    """
    if not members:
        raise EmptyMemberSetError("Нельзя разделить сумму на пустой состав участников")

    base, remainder = divmod(total, len(members))
    return {member: base + (1 if idx < remainder else 0) for idx, member in enumerate(members)}


# =========================
# 3) NET-БАЛАНСЫ
# =========================

def calculate_differences(
    members: Sequence[str],
    paid_by_member: Dict[str, int],
    fair_shares: Dict[str, int],
) -> Dict[str, int]:
    """net[m] = заплатил(m) - доля(m). Сумма обязана быть нулевой."""
    net = {m: paid_by_member.get(m, 0) - fair_shares.get(m, 0) for m in members}

    drift = sum(net.values())
    if drift != 0:
        raise SettlementInvariantError(f"Сумма балансов не равна нулю: {drift}")
    return net


def calculate_balances(members: Iterable[str], expenses: Iterable[Any]) -> Dict[str, int]:
    """Полный путь от сырых расходов до net-балансов (в каноническом порядке)."""
    ordered = normalize_members(members)
    expenses = list(expenses)
    validate_expenses(ordered, expenses)

    if not expenses:
        return {m: 0 for m in ordered}

    paid = calculate_total_paid_by_member(expenses)
    total = calculate_total(paid)
    shares = calculate_fair_shares(total, ordered)
    net = calculate_differences(ordered, paid, shares)

    log.debug("balances: total=%s members=%s net=%s", total, len(ordered), net)
    return net


def build_balance_report(members: Iterable[str], expenses: Iterable[Any]) -> Dict[str, Any]:
    """
    Развёрнутый отчёт для экрана балансов:
      { "total": int, "members": [{"member","paid","fair_share","balance"}, ...] }
    """
    ordered = normalize_members(members)
    expenses = list(expenses)
    net = calculate_balances(ordered, expenses)

    paid = calculate_total_paid_by_member(expenses)
    total = calculate_total(paid)
    shares = calculate_fair_shares(total, ordered) if ordered else {}

    return {
        "total": total,
        "members": [
            {
                "member": m,
                "paid": paid.get(m, 0),
                "fair_share": shares.get(m, 0),
                "balance": net[m],
            }
            for m in ordered
        ],
    }


# =========================
# 4) ЖАДНЫЙ SETTLE-UP
# =========================

def greedy_settle_up(net_balance: Dict[str, int]) -> List[SettlementTransfer]:
    """
    Жадный settle-up.
    Кредиторы - по убыванию баланса, должники - по возрастанию (самый «минусовой» первым).
    Ничьи - по порядку ключей net_balance (канонический порядок участников).
    """
    order = {m: idx for idx, m in enumerate(net_balance)}

    creditors: List[Tuple[str, int]] = sorted(
        [(m, bal) for m, bal in net_balance.items() if bal > 0],
        key=lambda x: (-x[1], order[x[0]]),
    )
    debtors: List[Tuple[str, int]] = sorted(
        [(m, bal) for m, bal in net_balance.items() if bal < 0],
        key=lambda x: (x[1], order[x[0]]),
    )

    settlements: List[SettlementTransfer] = []
    i, j = 0, 0
    while i < len(debtors) and j < len(creditors):
        debtor_id, debt = debtors[i]
        creditor_id, credit = creditors[j]

        amount = min(credit, -debt)
        settlements.append(SettlementTransfer(from_member=debtor_id, to_member=creditor_id, amount=amount))

        debtors[i] = (debtor_id, debt + amount)
        creditors[j] = (creditor_id, credit - amount)

        if debtors[i][1] == 0:
            i += 1
        if creditors[j][1] == 0:
            j += 1

    if i != len(debtors) or j != len(creditors):
        raise SettlementInvariantError(
            f"План не сведён: должников осталось {len(debtors) - i}, кредиторов {len(creditors) - j}"
        )
    return settlements


def apply_transfers(net_balance: Dict[str, int], transfers: Iterable[SettlementTransfer]) -> Dict[str, int]:
    """Балансы после выполнения переводов (должник +amount, кредитор -amount)."""
    after = dict(net_balance)
    for t in transfers:
        after[t.from_member] = after.get(t.from_member, 0) + t.amount
        after[t.to_member] = after.get(t.to_member, 0) - t.amount
    return after


# =========================
# ТОЧКА ВХОДА
# =========================

def compute_settlement(members: Iterable[str], expenses: Iterable[Any]) -> List[SettlementTransfer]:
    """
    Пересчитывает план взаиморасчётов по ПОЛНОЙ истории расходов.
    Нет участников и/или нет расходов - пустой план (кроме случая «расходы без участников»).
    """
    ordered = normalize_members(members)
    expenses = list(expenses)
    if not expenses:
        return []

    net = calculate_balances(ordered, expenses)
    plan = greedy_settle_up(net)
    log.debug("settle-up: %s transfers for %s members", len(plan), len(ordered))
    return plan
