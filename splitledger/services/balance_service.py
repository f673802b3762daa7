import logging
from decimal import Decimal
from typing import Dict, Iterable, List

from splitledger.core.config import settings
from splitledger.core.exceptions import ParticipantNotFoundError
from splitledger.core.utils import ZERO, qround
from splitledger.schemas.balances import (
    Balance,
    BalanceReport,
    BalanceSheet,
    DebtEdge,
    ParticipantPosition,
    Summary,
)
from splitledger.schemas.expense import Expense
from splitledger.schemas.group import Participant

logger = logging.getLogger(__name__)


def as_expenses(expenses: Iterable) -> List[Expense]:
    """Accept schema instances, dicts or ORM rows."""
    return [e if isinstance(e, Expense) else Expense.model_validate(e) for e in expenses or []]


def as_participants(participants: Iterable) -> List[Participant]:
    return [
        p if isinstance(p, Participant) else Participant.model_validate(p)
        for p in participants or []
    ]


# working fine
def compute_balances(expenses: Iterable, participants: Iterable) -> BalanceSheet:
    """
    Returns one Balance per roster participant, in roster order.

    net_balance = total_paid - total_owed

    Sums are rounded once at the end, not per expense. Payers or split
    participants that are not on the roster are skipped.
    """
    expenses = as_expenses(expenses)
    roster = as_participants(participants)

    paid_map: Dict[str, Decimal] = {p.participant_id: Decimal("0") for p in roster}
    owed_map: Dict[str, Decimal] = {p.participant_id: Decimal("0") for p in roster}

    for exp in expenses:
        # payer gets credited with the full amount
        if exp.payer_id in paid_map:
            paid_map[exp.payer_id] += exp.amount
        else:
            logger.debug("payer %s is not on the roster, ignored", exp.payer_id)

        # every split is owed by its participant, payer included
        for s in exp.splits:
            if s.participant_id in owed_map:
                owed_map[s.participant_id] += s.amount
            else:
                logger.debug("split participant %s is not on the roster, ignored", s.participant_id)

    balances = []
    for p in roster:
        paid = paid_map[p.participant_id]
        owed = owed_map[p.participant_id]
        balances.append(Balance(
            participant_id=p.participant_id,
            participant_name=p.name,
            participant_color=p.color,
            total_paid=qround(paid),
            total_owed=qround(owed),
            net_balance=qround(paid - owed),
        ))

    return BalanceSheet(balances=balances)


def compute_debt_matrix(expenses: Iterable, participants: Iterable) -> List[DebtEdge]:
    """
    Who owes whom, straight from the splits.

    Each split not belonging to the payer becomes a debt from the split
    participant to the payer. Debts are accumulated per (debtor, creditor)
    pair but never netted against the reverse pair.
    """
    expenses = as_expenses(expenses)
    roster = as_participants(participants)
    names = {p.participant_id: p.name for p in roster}

    # debtor -> {creditor -> amount}
    debts: Dict[str, Dict[str, Decimal]] = {pid: {} for pid in names}

    for exp in expenses:
        payer_id = exp.payer_id
        if payer_id not in names:
            continue

        for s in exp.splits:
            if s.participant_id == payer_id or s.participant_id not in names:
                continue
            row = debts[s.participant_id]
            row[payer_id] = row.get(payer_id, Decimal("0")) + s.amount

    edges = []
    for debtor_id, row in debts.items():
        for creditor_id, total in row.items():
            amount = qround(total)
            # anything at or below the threshold is rounding noise
            if amount > settings.NOISE_THRESHOLD:
                edges.append(DebtEdge(
                    from_id=debtor_id,
                    from_name=names[debtor_id],
                    to_id=creditor_id,
                    to_name=names[creditor_id],
                    amount=amount,
                ))

    return edges


def compute_summary(expenses: Iterable) -> Summary:
    expenses = as_expenses(expenses)
    count = len(expenses)
    total = sum((e.amount for e in expenses), Decimal("0"))

    return Summary(
        total_expenses=count,
        total_spent=qround(total),
        average_expense=qround(total / count) if count else ZERO,
    )


def participant_position(
    expenses: Iterable,
    participants: Iterable,
    participant_id: str,
) -> ParticipantPosition:
    """
    One participant's view of the group: their balance plus the debts they
    owe and the debts owed to them.
    """
    expenses = as_expenses(expenses)
    roster = as_participants(participants)

    sheet = compute_balances(expenses, roster)
    balance = next((b for b in sheet.balances if b.participant_id == participant_id), None)

    if balance is None:
        raise ParticipantNotFoundError(f"Participant {participant_id} is not in this group")

    matrix = compute_debt_matrix(expenses, roster)
    owed_by = [e for e in matrix if e.from_id == participant_id]
    owed_to = [e for e in matrix if e.to_id == participant_id]

    return ParticipantPosition(
        balance=balance,
        owed_by_participant=owed_by,
        owed_to_participant=owed_to,
        total_owed=qround(sum((e.amount for e in owed_by), Decimal("0"))),
        total_owed_to_participant=qround(sum((e.amount for e in owed_to), Decimal("0"))),
    )


def balance_report(expenses: Iterable, participants: Iterable) -> BalanceReport:
    expenses = as_expenses(expenses)
    roster = as_participants(participants)

    return BalanceReport(
        balances=compute_balances(expenses, roster).balances,
        balance_matrix=compute_debt_matrix(expenses, roster),
        summary=compute_summary(expenses),
    )
