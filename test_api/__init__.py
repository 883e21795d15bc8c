"""
Test Suite for the Member Authentication API

This package contains tests for the authentication API including:
- Endpoint tests for register, login, OAuth and refresh-token
- Unit tests for the token issuer, refresh token store and credential verifier
- Model and validation tests
- A Locust file for load testing a running server
"""
