"""
Test suite for partial-function

Contains:
- tests/unit/          : Unit tests for ordering, core, standard kinds, contracts and loader
"""
