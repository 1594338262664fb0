"""
fintrack - Source Package

A personal finance tracker: transactions, KPIs, rule-based insights,
savings goals, a net-worth projection and a few money habits.

DESIGN PRINCIPLES:
1. Analytics are pure functions over the current ledger
2. Stored documents are never trusted; unreadable data degrades to defaults
3. Input is validated at the boundary, not inside the engine
4. Every state change is logged
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "fintrack Team"
