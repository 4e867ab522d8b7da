"""
Data Transfer Objects (DTOs) Layer

Pydantic models describing the envelopes reshaper produces, for use as
FastAPI ``response_model`` values or for validating payloads in tests.

Structure:
- response/: DTOs for outgoing API responses
"""
