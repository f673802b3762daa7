from decimal import Decimal

import pytest

from splitledger.schemas.expense import Expense, Split
from splitledger.schemas.group import Group, Participant


def make_expense(payer_id, amount, splits, mode="custom", group_id="g1"):
    return Expense(
        amount=Decimal(str(amount)),
        payer_id=payer_id,
        group_id=group_id,
        split_mode=mode,
        splits=[Split(participant_id=pid, amount=Decimal(str(amt))) for pid, amt in splits],
    )


@pytest.fixture
def participants():
    return [
        Participant(participant_id="alice", name="Alice", color="#ff0000"),
        Participant(participant_id="bob", name="Bob"),
        Participant(participant_id="carol", name="Carol"),
        Participant(participant_id="dave", name="Dave"),
    ]


@pytest.fixture
def group(participants):
    return Group(group_id="g1", name="Trip", participants=participants)


@pytest.fixture
def expenses():
    return [
        # alice pays dinner for everyone
        make_expense("alice", "100.00", [
            ("alice", "25.00"), ("bob", "25.00"), ("carol", "25.00"), ("dave", "25.00"),
        ], mode="equal"),
        # bob pays a taxi for bob and carol
        make_expense("bob", "30.00", [("bob", "15.00"), ("carol", "15.00")], mode="equal"),
        # carol pays tickets for alice and carol
        make_expense("carol", "60.00", [("alice", "40.00"), ("carol", "20.00")]),
    ]


@pytest.fixture
def expense_factory():
    return make_expense
