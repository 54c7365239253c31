"""
Core domain models and invariants.

This module contains the disk row abstraction and the result value produced
by the sorting algorithms. It has no dependencies on the algorithms themselves.
"""
