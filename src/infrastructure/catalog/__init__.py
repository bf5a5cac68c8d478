"""Catalog integration.

HTTP clients for the catalog metadata, mail and preview APIs plus the mappers
that turn their JSON into view-models.

Structure:
- base_api_client.py: Shared request/status/JSON handling
- query_params.py: Table query-string and slug helpers
- api/: One client per catalog service
- mappers/: JSON to view-model conversion
"""
