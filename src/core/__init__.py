"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the dual state
model, independent of any host program.
"""
