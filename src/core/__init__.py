"""
Core calendar functions, date period models and contracts.

This module contains the foundational building blocks: pure date arithmetic
with no shared state and no dependency on the current time.
"""
