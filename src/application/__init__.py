"""Application layer - Catalog use cases and orchestration.

This layer follows the CQRS pattern:
- Commands: Edits sent to the metadata service (descriptions, owners)
- Queries: Reads from the metadata and preview services
- Services: Owner notification helpers shared by handlers

The application layer orchestrates requests and mapping but owns no state.
"""
