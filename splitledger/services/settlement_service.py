import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from splitledger.core.config import settings
from splitledger.core.utils import is_settled, simplify_debts
from splitledger.schemas.settlements import Settlement, SettlementReport
from splitledger.services.balance_service import as_expenses, as_participants, compute_balances

logger = logging.getLogger(__name__)


def compute_minimal_settlements(expenses: Iterable, participants: Iterable) -> List[Settlement]:
    # Step 1: Net balance per participant, roster order
    sheet = compute_balances(expenses, participants)
    net_map = {b.participant_id: b.net_balance for b in sheet.balances}
    names = {b.participant_id: b.participant_name for b in sheet.balances}

    # Step 2: Greedy matching of largest creditor against largest debtor
    transfers = simplify_debts(net_map, settings.NOISE_THRESHOLD)

    settlements = [
        Settlement(
            from_id=debtor_id,
            from_name=names.get(debtor_id),
            to_id=creditor_id,
            to_name=names.get(creditor_id),
            amount=amount,
        )
        for debtor_id, creditor_id, amount in transfers
    ]

    logger.debug("%d settlements for %d participants", len(settlements), len(net_map))
    return settlements


def settlement_report(expenses: Iterable, participants: Iterable) -> SettlementReport:
    expenses = as_expenses(expenses)
    roster = as_participants(participants)

    settlements = compute_minimal_settlements(expenses, roster)

    return SettlementReport(
        settlements=settlements,
        balances=compute_balances(expenses, roster).balances,
        total_transactions=len(settlements),
    )


# working fine
def is_group_settled(
    expenses: Iterable,
    participants: Iterable,
    tolerance: Optional[Decimal] = None,
) -> bool:
    sheet = compute_balances(expenses, participants)
    net_map = {b.participant_id: b.net_balance for b in sheet.balances}

    return is_settled(net_map, settings.SETTLED_TOLERANCE if tolerance is None else tolerance)
