"""
Pydantic schemas for Settlement reports.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict


class TransferResponse(BaseModel):
    """Schema for a single payment instruction."""
    model_config = ConfigDict(populate_by_name=True)

    from_member: str = Field(alias="from")
    to_member: str = Field(alias="to")
    amount: float


class SettlementReportResponse(BaseModel):
    """Schema for the settlement report of a trip."""
    model_config = ConfigDict(populate_by_name=True)

    paid: Dict[str, float]
    should_pay: Dict[str, float] = Field(alias="shouldPay")
    net: Dict[str, float]
    settlements: List[TransferResponse]
    total: float

    @classmethod
    def from_report(cls, report) -> "SettlementReportResponse":
        return cls(
            paid=report.paid,
            should_pay=report.should_pay,
            net=report.net,
            settlements=[TransferResponse(**t._asdict()) for t in report.settlements],
            total=report.total,
        )
