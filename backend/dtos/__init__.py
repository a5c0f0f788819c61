"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models.
DTOs prevent leaking credentials and storage structure to external APIs.

Structure:
- request/: DTOs for incoming API requests
- response/: DTOs for outgoing API responses and the filters that build them
- validation: one validator per request DTO
"""
