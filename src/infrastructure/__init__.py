"""Infrastructure layer - Adapters for external systems.

Structure:
- catalog/: Catalog HTTP clients and response mappers
- logging/: structlog-based logger adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
