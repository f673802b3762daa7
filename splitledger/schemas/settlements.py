from typing import List
from pydantic import BaseModel
from splitledger.schemas.balances import Balance, DebtEdge

class Settlement(DebtEdge):
    """Suggested payment produced by debt simplification."""

class SettlementReport(BaseModel):
    settlements: List[Settlement]
    balances: List[Balance]
    total_transactions: int

    class Config:
        frozen = True
