import logging
from decimal import Decimal

from splitledger.core.log import configure_logging
from splitledger.core.utils import (
    apply_rounding_difference,
    is_settled,
    qround,
    simplify_debts,
    to_decimal,
)


def test_qround_half_up():
    assert qround(Decimal("0.005")) == Decimal("0.01")
    assert qround(Decimal("2.675")) == Decimal("2.68")
    assert qround(Decimal("-0.005")) == Decimal("-0.01")


def test_to_decimal():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("3.50") == Decimal("3.50")
    assert to_decimal(7) == Decimal("7")
    assert to_decimal(None) == Decimal("0")


def test_apply_rounding_difference():
    assert apply_rounding_difference([Decimal("3.33")] * 3, Decimal("10.00")) == [
        Decimal("3.34"), Decimal("3.33"), Decimal("3.33"),
    ]
    assert apply_rounding_difference([Decimal("0.02")] * 3, Decimal("0.05")) == [
        Decimal("0.01"), Decimal("0.02"), Decimal("0.02"),
    ]
    assert apply_rounding_difference([], Decimal("1.00")) == []


def test_apply_rounding_difference_leaves_input_alone():
    amounts = [Decimal("3.33")] * 3
    apply_rounding_difference(amounts, Decimal("10.00"))

    assert amounts == [Decimal("3.33")] * 3


def test_simplify_debts():
    net = {
        "a": Decimal("50.00"),
        "b": Decimal("-30.00"),
        "c": Decimal("-20.00"),
        "d": Decimal("0.01"),
    }

    assert simplify_debts(net) == [
        ("b", "a", Decimal("30.00")),
        ("c", "a", Decimal("20.00")),
    ]


def test_simplify_debts_leaves_residue_below_threshold():
    net = {"a": Decimal("10.01"), "b": Decimal("-10.00")}

    assert simplify_debts(net) == [("b", "a", Decimal("10.00"))]


def test_is_settled():
    assert is_settled({"a": Decimal("0.05"), "b": Decimal("-0.05")}, Decimal("0.05"))
    assert not is_settled({"a": Decimal("0.06"), "b": Decimal("-0.06")}, Decimal("0.05"))


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    configure_logging("debug")

    ours = [h for h in logger.handlers if getattr(h, "_splitledger", False)]
    assert len(ours) == 1
    assert logger.level == logging.DEBUG
