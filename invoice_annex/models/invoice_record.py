"""InvoiceRecord data model representing one extracted invoice line item."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)

# Field name -> accepted input keys (snake_case first, then the extraction
# service's camelCase)
_FIELD_KEYS = {
    "invoice_number": ("invoice_number", "invoiceNumber"),
    "date": ("date",),
    "supplier_name": ("supplier_name", "supplierName"),
    "description": ("description",),
    "amount": ("amount",),
    "quantity": ("quantity",),
    "vat": ("vat",),
    "total": ("total",),
}

_TEXT_FIELDS = ("invoice_number", "date", "supplier_name", "description")
_NUMERIC_FIELDS = ("amount", "quantity", "vat", "total")


@dataclass(frozen=True)
class InvoiceRecord:
    """One structured line item extracted upstream from a scanned invoice.
    
    Every field may be None; the summary layout renders missing text as ""
    and missing numbers as 0. Numeric signs are not checked.
    
    Attributes:
        invoice_number: Invoice number as printed
        date: Invoice date in display form (not necessarily ISO)
        supplier_name: Supplier/vendor name
        description: Description of goods or services
        amount: Base amount without VAT
        quantity: Quantity
        vat: VAT/fees amount
        total: Total amount including VAT
    """
    
    invoice_number: Optional[str] = None
    date: Optional[str] = None
    supplier_name: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[float] = None
    quantity: Optional[float] = None
    vat: Optional[float] = None
    total: Optional[float] = None
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InvoiceRecord:
        """Create InvoiceRecord from a dict with snake_case or camelCase keys.
        
        Unknown keys are ignored. Numeric fields accept numbers and plain
        numeric strings; anything else (e.g. "Rs 5000.00") becomes None.
        """
        values = {}
        for name, keys in _FIELD_KEYS.items():
            raw = None
            for key in keys:
                if data.get(key) is not None:
                    raw = data[key]
                    break
            if name in _NUMERIC_FIELDS:
                values[name] = _coerce_number(name, raw)
            else:
                values[name] = None if raw is None else str(raw)
        return cls(**values)
    
    def to_dict(self) -> dict:
        """Convert to dict with the extraction service's camelCase keys."""
        return {
            "invoiceNumber": self.invoice_number,
            "date": self.date,
            "supplierName": self.supplier_name,
            "description": self.description,
            "amount": self.amount,
            "quantity": self.quantity,
            "vat": self.vat,
            "total": self.total,
        }


def _coerce_number(name: str, raw: Any) -> Optional[float]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        logger.warning(f"Ignoring boolean value for '{name}': {raw!r}")
        return None
    if isinstance(raw, (int, float)):
        return raw
    if isinstance(raw, str):
        try:
            return float(raw.strip())
        except ValueError:
            pass
    logger.warning(f"Ignoring non-numeric value for '{name}': {raw!r}")
    return None


def coerce_records(records: Iterable[Any]) -> list:
    """Turn a sequence of InvoiceRecord or mappings into InvoiceRecords."""
    result = []
    for record in records:
        if isinstance(record, InvoiceRecord):
            result.append(record)
        elif isinstance(record, Mapping):
            result.append(InvoiceRecord.from_dict(record))
        else:
            raise TypeError(f"Expected InvoiceRecord or mapping, got {type(record).__name__}")
    return result


def grand_total(records: Iterable[InvoiceRecord]) -> float:
    """Sum of record totals; missing totals count as 0."""
    return sum((record.total or 0) for record in records)
