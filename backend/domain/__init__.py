"""
Domain Layer

This package contains domain types that are independent of persistence
and transport concerns.

Structure:
- value_objects/: Immutable value types without identity
"""
