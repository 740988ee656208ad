"""Global liquidity series and the denominator index."""

__version__ = "0.3.0"
