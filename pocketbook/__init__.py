"""
Pocketbook - Source Package

A personal ledger and budget-accounting engine: users record income and
expenses, cap spending per category, inspect statistics and transfer
funds to each other.

DESIGN PRINCIPLES:
1. Validate before mutating
2. Fail early, fail visibly
3. A transfer is all-or-nothing
4. Every mutation is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Pocketbook Team"
