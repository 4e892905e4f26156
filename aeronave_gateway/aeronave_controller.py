"""
Aeronave Controller - mutation handling for aircraft records.

Each mutation performs exactly one AeronaveStore call. Failures are logged and
re-raised as a tagged AeronaveError carrying the original exception as its cause.
"""
from __future__ import annotations

from loguru import logger

from aeronave_gateway.api.types import Aeronave, AeronaveInput
from aeronave_gateway.aeronave_store import AeronaveStore
from aeronave_gateway.errors import CreationError, UpdateError, DeletionError, NotFoundError, describe_error
from aeronave_gateway.helpers.deserializers import aeronave_input_to_dict
from aeronave_gateway.models import AeronaveDocument


class AeronaveController():
    def __init__(self, aeronave_store: AeronaveStore):
        self.aeronave_store = aeronave_store

    async def create_aeronave(self, aeronave_input: AeronaveInput) -> Aeronave:
        try:
            document = AeronaveDocument.model_validate(aeronave_input_to_dict(aeronave_input))
            aeronave = await self.aeronave_store.insert(document)
        except Exception as e:
            logger.error("Error creating aeronave: {}", describe_error(e))
            raise CreationError(e) from e

        logger.info("Aeronave created: {}", aeronave.id)
        return aeronave

    async def update_aeronave(self, aeronave_id: str, aeronave_input: AeronaveInput) -> Aeronave:
        try:
            aeronave = await self.aeronave_store.find_and_replace(aeronave_id, aeronave_input_to_dict(aeronave_input))
        except Exception as e:
            logger.error("Error updating aeronave {}: {}", aeronave_id, describe_error(e))
            raise UpdateError(e) from e

        if aeronave is None:
            logger.error("Error updating aeronave: {} not found", aeronave_id)
            raise NotFoundError("update", aeronave_id)

        logger.info("Aeronave updated: {}", aeronave_id)
        return aeronave

    async def delete_aeronave(self, aeronave_id: str) -> Aeronave:
        try:
            aeronave = await self.aeronave_store.find_and_delete(aeronave_id)
        except Exception as e:
            logger.error("Error deleting aeronave {}: {}", aeronave_id, describe_error(e))
            raise DeletionError(e) from e

        if aeronave is None:
            logger.error("Error deleting aeronave: {} not found", aeronave_id)
            raise NotFoundError("delete", aeronave_id)

        logger.info("Aeronave deleted: {}", aeronave_id)
        return aeronave
