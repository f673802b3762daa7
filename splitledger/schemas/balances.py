from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel

class Balance(BaseModel):
    participant_id: str
    participant_name: Optional[str] = None
    participant_color: Optional[str] = None
    total_paid: Decimal
    total_owed: Decimal
    net_balance: Decimal

    class Config:
        frozen = True

class BalanceSheet(BaseModel):
    balances: List[Balance]

    class Config:
        frozen = True

class DebtEdge(BaseModel):
    """`from_id` owes `to_id` the amount."""
    from_id: str
    from_name: Optional[str] = None
    to_id: str
    to_name: Optional[str] = None
    amount: Decimal

    class Config:
        frozen = True

class Summary(BaseModel):
    total_expenses: int
    total_spent: Decimal
    average_expense: Decimal

    class Config:
        frozen = True

class ParticipantPosition(BaseModel):
    balance: Balance
    owed_by_participant: List[DebtEdge]
    owed_to_participant: List[DebtEdge]
    total_owed: Decimal
    total_owed_to_participant: Decimal

    class Config:
        frozen = True

class BalanceReport(BaseModel):
    balances: List[Balance]
    balance_matrix: List[DebtEdge]
    summary: Summary

    class Config:
        frozen = True
