"""API request and response models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.invoice_record import InvoiceRecord


class InvoiceRecordPayload(BaseModel):
    """One extracted line item as sent by the extraction front-end."""
    
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    
    invoice_number: Optional[str] = Field(None, alias="invoiceNumber")
    date: Optional[str] = Field(None, description="Invoice date in display form")
    supplier_name: Optional[str] = Field(None, alias="supplierName")
    description: Optional[str] = None
    amount: Optional[float] = None
    quantity: Optional[float] = None
    vat: Optional[float] = None
    total: Optional[float] = None
    
    def to_record(self) -> InvoiceRecord:
        return InvoiceRecord(**self.model_dump(by_alias=False))


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Optional error details")
