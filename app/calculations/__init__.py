"""
Financial Calculation Engine

Pure calculation modules for the rent-versus-buy analysis: rent
projection, mortgage amortization, and row compression for compact tables.
No module here performs I/O.
"""

from app.calculations import amortization, compression, rent, rounding

__all__ = ["amortization", "compression", "rent", "rounding"]
