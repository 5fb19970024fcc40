"""
Test suite for date-tasks

Contains:
- tests/unit/          : Unit tests for calendar functions, period models,
                         contracts and the work schedule generator
"""
