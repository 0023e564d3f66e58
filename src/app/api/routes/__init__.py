"""Route group exports."""

from . import billing, customers, health, supplies

__all__ = ["billing", "customers", "health", "supplies"]
