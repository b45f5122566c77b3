"""
Core numeric primitives and domain models.

This module contains the building blocks of generic summation: the closed
set of numeric kinds, the summation utility, and the KeyedCollection model.
"""
