"""Test suite for the catalog metadata client.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic, mappers and handlers with mocked clients
- integration/: Integration tests - real httpx clients against pytest-httpx,
  real structlog output
"""
