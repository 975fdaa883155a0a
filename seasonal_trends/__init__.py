"""Seasonal trend decomposition and forecasting engine for the resale admin backend"""

__version__ = "1.0.0"
