"""Competitive-programming algorithms: modular math, max flow, SCC, strings and contest solutions."""

__version__ = "0.1.0"

__all__ = ["modmath", "maxflow", "scc", "strings", "contest"]