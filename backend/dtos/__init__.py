"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models.
Routes accept request DTOs and services return response DTOs, so ORM
instances never leave a database session.

Structure:
- request/: DTOs for incoming API requests
- response/: DTOs for outgoing API responses
- internal/: DTOs exchanged with the authentication layer
"""
