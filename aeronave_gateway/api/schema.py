"""
Combined GraphQL schema for the Aeronave API.

Queries go straight to the AeronaveStore, mutations go through the
AeronaveController which normalizes failures.
"""
from __future__ import annotations
import strawberry
from typing import TYPE_CHECKING

from aeronave_gateway.api.types import Aeronave, AeronaveInput

if TYPE_CHECKING:
    from aeronave_gateway.aeronave_store import AeronaveStore
    from aeronave_gateway.aeronave_controller import AeronaveController


@strawberry.type
class Query:

    @strawberry.field
    async def aeronaves(self, info: strawberry.types.Info) -> list[Aeronave]:
        """Get all aircraft records."""
        aeronave_store: AeronaveStore = info.context["aeronave_store"]
        return await aeronave_store.find_all()

    @strawberry.field
    async def aeronave(self, info: strawberry.types.Info, id: strawberry.ID) -> Aeronave | None:
        """Get a specific aircraft record by id."""
        aeronave_store: AeronaveStore = info.context["aeronave_store"]
        return await aeronave_store.find_by_id(id)


@strawberry.type
class Mutation:

    @strawberry.mutation
    async def create_aeronave(self, info: strawberry.types.Info, aeronave: AeronaveInput) -> Aeronave:
        aeronave_controller: AeronaveController = info.context["aeronave_controller"]
        return await aeronave_controller.create_aeronave(aeronave)

    @strawberry.mutation
    async def update_aeronave(self, info: strawberry.types.Info, id: strawberry.ID, aeronave: AeronaveInput) -> Aeronave:
        """Replace the sent fields on an existing aircraft record."""
        aeronave_controller: AeronaveController = info.context["aeronave_controller"]
        return await aeronave_controller.update_aeronave(id, aeronave)

    @strawberry.mutation
    async def delete_aeronave(self, info: strawberry.types.Info, id: strawberry.ID) -> Aeronave:
        aeronave_controller: AeronaveController = info.context["aeronave_controller"]
        return await aeronave_controller.delete_aeronave(id)


# Create the combined GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)
