from decimal import Decimal

import pytest
from pydantic import ValidationError

from splitledger.schemas.expense import Expense, Split
from splitledger.schemas.group import Group, Participant


def test_group_limit():
    participants = [Participant(participant_id=f"p{i}", name=f"P{i}") for i in range(5)]

    with pytest.raises(ValidationError, match="maximum of 4"):
        Group(group_id="g", name="Too many", participants=participants)


def test_group_rejects_duplicate_participants():
    participants = [Participant(participant_id="p", name="P"), Participant(participant_id="p", name="Q")]

    with pytest.raises(ValidationError, match="Duplicate"):
        Group(group_id="g", name="Dupes", participants=participants)


def test_group_membership(group):
    assert group.has_participant("alice")
    assert not group.has_participant("mallory")


def test_expense_needs_splits():
    with pytest.raises(ValidationError):
        Expense(amount=10, payer_id="a", group_id="g", split_mode="equal", splits=[])


def test_split_amount_not_negative():
    with pytest.raises(ValidationError):
        Split(participant_id="a", amount=Decimal("-0.01"))


def test_records_are_frozen():
    split = Split(participant_id="a", amount=Decimal("1.00"))

    with pytest.raises(ValidationError):
        split.amount = Decimal("2.00")


def test_expense_from_attributes():
    class Row:
        amount = Decimal("4.00")
        payer_id = "a"
        group_id = "g"
        split_mode = "custom"
        expense_id = "e9"
        title = None
        splits = [Split(participant_id="a", amount=Decimal("4.00"))]

    expense = Expense.model_validate(Row())

    assert expense.expense_id == "e9"
    assert expense.splits[0].amount == Decimal("4.00")
