"""
Core domain models and mathematical primitives.

This module contains the foundational building blocks: pure numeric
functions and immutable value objects.
"""
