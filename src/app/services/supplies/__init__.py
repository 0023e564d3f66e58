"""Supply ledger exports."""

from .ledger import dues_for, holdings_for, line_amount, record_batch, supplies_for

__all__ = ["record_batch", "supplies_for", "holdings_for", "line_amount", "dues_for"]
