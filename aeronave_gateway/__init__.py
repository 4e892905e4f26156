"""
Aeronave Gateway - Aircraft Registry API

A small service for managing aircraft records with:
- GraphQL API for queries and mutations
- Redis-backed document storage
- Pydantic field validation
"""

__version__ = "0.1.0"
