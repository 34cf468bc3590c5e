"""pricepath - Monte Carlo GBM price path simulation and Value-at-Risk."""

__version__ = "0.1.0"
