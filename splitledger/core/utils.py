from decimal import Decimal, ROUND_HALF_UP, getcontext
from typing import Dict, List, Tuple
import logging

logger = logging.getLogger(__name__)

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_decimal(value) -> Decimal:
    """
    Convert a caller supplied number to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1") and not its
    binary expansion.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def money(value) -> Decimal:
    return qround(to_decimal(value))


def apply_rounding_difference(amounts: List[Decimal], total: Decimal) -> List[Decimal]:
    """
    Make already-rounded amounts add up to total exactly.

    Whatever the rounded amounts are short of (or over) total is added to
    the first amount only. Callers control who absorbs the remainder through
    the order of the list.
    """
    if not amounts:
        return []

    difference = qround(total - sum(amounts, ZERO))
    adjusted = list(amounts)
    adjusted[0] = qround(adjusted[0] + difference)

    if difference:
        logger.debug("rounding difference %s applied to first share", difference)

    return adjusted


# working fine
def simplify_debts(
    net_map: Dict[str, Decimal],
    threshold: Decimal = CENTS,
) -> List[Tuple[str, str, Decimal]]:
    """
    Standard Greedy algorithm to minimize number of transactions.

    Returns (debtor_id, creditor_id, amount) tuples. Ties in the sort keep
    the insertion order of net_map.
    """
    creditors = []
    debtors = []

    for pid, bal in net_map.items():
        if bal > threshold:  # Avoid rounding noise
            creditors.append([pid, bal])
        elif bal < -threshold:
            debtors.append([pid, -bal])

    creditors.sort(key=lambda x: x[1], reverse=True)
    debtors.sort(key=lambda x: x[1], reverse=True)

    transfers: List[Tuple[str, str, Decimal]] = []
    i = 0
    j = 0

    while i < len(creditors) and j < len(debtors):
        cred_id, cred_amt = creditors[i]
        debt_id, debt_amt = debtors[j]

        pay_amt = qround(min(cred_amt, debt_amt))

        if pay_amt > threshold:
            transfers.append((debt_id, cred_id, pay_amt))
            logger.debug("settle %s -> %s : %s", debt_id, cred_id, pay_amt)

        creditors[i][1] = qround(cred_amt - pay_amt)
        debtors[j][1] = qround(debt_amt - pay_amt)

        if creditors[i][1] <= threshold:
            i += 1
        if debtors[j][1] <= threshold:
            j += 1

    return transfers


def is_settled(net_map: Dict[str, Decimal], tolerance: Decimal) -> bool:
    """
    A group is settled if:
        abs(net_balance) <= tolerance
        for every participant
    """
    for amount in net_map.values():
        if abs(amount) > tolerance:
            return False

    return True
