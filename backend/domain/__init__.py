"""
Domain Layer

This package contains domain types that are independent of persistence
and infrastructure.

Structure:
- value_objects/: Immutable value types without identity (constraints, page windows)
"""
