"""Xadreis: chess position model, legal move generation and perft."""

__version__ = "0.1.0"
