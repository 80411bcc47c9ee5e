"""SAC and Price loan amortization calculator."""

__version__ = "0.1.0"
