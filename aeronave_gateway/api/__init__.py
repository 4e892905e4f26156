"""
GraphQL API layer for Aeronave Gateway.

This package contains:
- types.py: GraphQL type definitions
- schema.py: Query and Mutation roots combined into a Strawberry schema
"""

from .schema import schema

__all__ = ["schema"]
