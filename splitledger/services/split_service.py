"""
Split allocation.

Turns one expense amount into per-participant shares. Every mode rounds
shares half-up to cents and then hands whatever the rounded shares are
short of (or over) the expense amount to the first participant, so the
shares always add back up to the expense amount exactly.
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from splitledger.core.config import settings
from splitledger.core.exceptions import InvalidSplitError
from splitledger.core.utils import ZERO, apply_rounding_difference, money, qround, to_decimal
from splitledger.schemas.expense import Split, SplitInput, SplitMode

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")

SplitSpec = Union[str, SplitInput, dict]


def _coerce_mode(mode) -> SplitMode:
    try:
        return SplitMode(mode)
    except ValueError:
        raise InvalidSplitError(f"Invalid split mode: {getattr(mode, 'value', mode)}")


def _coerce_amount(amount) -> Decimal:
    if amount is None:
        raise InvalidSplitError("Expense amount is required")

    try:
        value = money(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidSplitError(f"Invalid expense amount: {amount}")

    # quiet NaN survives quantize and cannot be ordered
    if not value.is_finite():
        raise InvalidSplitError(f"Invalid expense amount: {amount}")
    if value < 0:
        raise InvalidSplitError("Expense amount cannot be negative")
    return value


def _coerce_values(values, label: str) -> List[Decimal]:
    try:
        decimals = [to_decimal(v) for v in values]
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidSplitError(f"Invalid split {label}")

    if not all(d.is_finite() for d in decimals):
        raise InvalidSplitError(f"Invalid split {label}")
    return decimals


def _coerce_specs(participants: Optional[Iterable[SplitSpec]]) -> List[SplitInput]:
    specs = []
    for p in participants or []:
        if isinstance(p, SplitInput):
            specs.append(p)
        elif isinstance(p, str):
            specs.append(SplitInput(participant_id=p))
        else:
            try:
                specs.append(SplitInput.model_validate(p))
            except ValidationError as e:
                raise InvalidSplitError(f"Invalid split entry: {e.errors()[0]['msg']}")

    ids = [s.participant_id for s in specs]
    if len(ids) != len(set(ids)):
        raise InvalidSplitError("Duplicate participants found in splits")

    return specs


def _to_splits(
    specs: List[SplitInput],
    amounts: List[Decimal],
    percentages: Optional[List[Decimal]] = None,
) -> List[Split]:
    # the first share absorbs the rounding difference and is the only one
    # that can be pushed below zero
    if amounts[0] < ZERO:
        raise InvalidSplitError(
            f"Rounding correction would make the first split "
            f"({specs[0].participant_id}: {amounts[0]}) negative"
        )

    return [
        Split(
            participant_id=s.participant_id,
            amount=amt,
            percentage=percentages[i] if percentages is not None else None,
        )
        for i, (s, amt) in enumerate(zip(specs, amounts))
    ]


def equal_splits(amount, participant_ids: Iterable[SplitSpec]) -> List[Split]:
    total = _coerce_amount(amount)
    specs = _coerce_specs(participant_ids)

    if not specs:
        raise InvalidSplitError("At least one participant is required for equal split")

    share = qround(total / len(specs))
    amounts = apply_rounding_difference([share] * len(specs), total)

    return _to_splits(specs, amounts)


def percentage_splits(amount, splits: Iterable[SplitSpec]) -> List[Split]:
    total = _coerce_amount(amount)
    specs = _coerce_specs(splits)

    if not specs:
        raise InvalidSplitError("At least one split is required for percentage split")

    percentages = _coerce_values([s.percentage for s in specs], "percentage")

    if any(p < 0 for p in percentages):
        raise InvalidSplitError("Percentages cannot be negative")

    total_percentage = sum(percentages, Decimal("0"))
    if abs(total_percentage - HUNDRED) > settings.SPLIT_TOLERANCE:
        raise InvalidSplitError(f"Percentages must sum to 100 (got {total_percentage})")

    amounts = [qround(total * p / HUNDRED) for p in percentages]
    amounts = apply_rounding_difference(amounts, total)

    return _to_splits(specs, amounts, percentages)


def custom_splits(amount, splits: Iterable[SplitSpec]) -> List[Split]:
    total = _coerce_amount(amount)
    specs = _coerce_specs(splits)

    if not specs:
        raise InvalidSplitError("At least one split is required for custom split")

    supplied = _coerce_values([s.amount for s in specs], "amount")
    supplied_total = sum(supplied, Decimal("0"))

    # small tolerance for rounding on the caller side
    if abs(supplied_total - total) > settings.SPLIT_TOLERANCE:
        raise InvalidSplitError(
            f"Custom split amounts ({supplied_total}) must sum to expense amount ({total})"
        )

    if any(a < 0 for a in supplied):
        raise InvalidSplitError("Split amounts cannot be negative")

    amounts = apply_rounding_difference([qround(a) for a in supplied], total)

    return _to_splits(specs, amounts)


def allocate_splits(mode, amount, participants: Iterable[SplitSpec]) -> List[Split]:
    """
    Allocate `amount` between participants according to `mode`.

    `participants` is a list of participant ids for equal mode, or of
    `SplitInput` (or dicts with the same keys) carrying a percentage or an
    amount for the other two modes. Raises InvalidSplitError when the input
    cannot be allocated.
    """
    split_mode = _coerce_mode(mode)
    logger.debug("allocating %s split of %s", split_mode.value, amount)

    if split_mode is SplitMode.EQUAL:
        return equal_splits(amount, participants)
    elif split_mode is SplitMode.PERCENTAGE:
        return percentage_splits(amount, participants)
    elif split_mode is SplitMode.CUSTOM:
        return custom_splits(amount, participants)

    raise InvalidSplitError(f"Invalid split mode: {split_mode.value}")
