"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple repository callers from the database models.

Structure:
- request/: DTOs for incoming search requests
- response/: DTOs for paginated results
"""
