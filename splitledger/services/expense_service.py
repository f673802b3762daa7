import logging
from typing import Optional

from splitledger.core.exceptions import InvalidSplitError
from splitledger.core.utils import money
from splitledger.schemas.expense import Expense, ExpenseCreate
from splitledger.schemas.group import Group
from splitledger.services.split_service import allocate_splits

logger = logging.getLogger(__name__)


def build_expense(
    group: Group,
    data: ExpenseCreate,
    paid_by: str,
    expense_id: Optional[str] = None,
) -> Expense:
    """
    Validate an incoming expense against the group roster and allocate its
    splits. Storing the result is up to the caller.
    """
    # -----------------------------------
    # 1. Payer must be on the roster
    # -----------------------------------
    if not group.has_participant(paid_by):
        raise InvalidSplitError("Payer is not a member of the group")

    # -----------------------------------
    # 2. Every split participant must be on the roster
    # -----------------------------------
    unknown = [s.participant_id for s in data.splits if not group.has_participant(s.participant_id)]

    if unknown:
        raise InvalidSplitError(
            f"One or more participants in splits are not members of the group: {', '.join(unknown)}"
        )

    # -----------------------------------
    # 3. Allocate (validates amounts per mode)
    # -----------------------------------
    splits = allocate_splits(data.split_mode, data.amount, data.splits)

    logger.debug("built %s expense of %s for group %s", data.split_mode.value, data.amount, group.group_id)

    return Expense(
        expense_id=expense_id,
        title=data.title,
        amount=money(data.amount),
        payer_id=paid_by,
        group_id=group.group_id,
        split_mode=data.split_mode,
        splits=splits,
    )
