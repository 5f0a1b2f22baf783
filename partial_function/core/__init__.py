"""
Core domain models, ordering primitives, and the piecewise builder/evaluator.

This module contains the foundational building blocks that are independent
of how piecewise definitions are described or loaded.
"""
