"""
Core domain models, cyclic index primitives, and contracts.

This module contains the foundational building blocks that are independent
of external systems (exchanges, network connectivity, etc.).
"""
