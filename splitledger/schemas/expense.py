from decimal import Decimal
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class SplitMode(str, Enum):
    EQUAL = "equal"
    CUSTOM = "custom"
    PERCENTAGE = "percentage"


class SplitInput(BaseModel):
    participant_id: str
    amount: Optional[Decimal] = None
    percentage: Optional[Decimal] = None

    class Config:
        frozen = True
        from_attributes = True


class Split(BaseModel):
    participant_id: str
    amount: Decimal = Field(ge=0)
    # only set for percentage splits, informational
    percentage: Optional[Decimal] = None

    class Config:
        frozen = True
        from_attributes = True


class ExpenseCreate(BaseModel):
    title: Optional[str] = None
    amount: Decimal = Field(gt=0)
    split_mode: SplitMode
    splits: List[SplitInput] = Field(min_length=1)

    class Config:
        frozen = True


class Expense(BaseModel):
    expense_id: Optional[str] = None
    title: Optional[str] = None
    amount: Decimal = Field(gt=0)
    payer_id: str
    group_id: str
    split_mode: SplitMode
    splits: List[Split] = Field(min_length=1)

    class Config:
        frozen = True
        from_attributes = True
