"""
Aeronave Store - Document persistence for aircraft records.

Each Aeronave is kept as one JSON document at {namespace}:aeronave:{id}.
Every method issues a single-document operation, so Redis single-key
atomicity is the only consistency guarantee; there is no cross-call
transaction and concurrent updates are last-writer-wins.
"""

import re
from uuid import uuid4

import redis.asyncio as redis

from aeronave_gateway.api.types import Aeronave
from aeronave_gateway.models import AeronaveDocument
from aeronave_gateway.helpers.serializers import aeronave_to_json
from aeronave_gateway.helpers.deserializers import json_to_aeronave, document_to_aeronave


class AeronaveStore():
    def __init__(self, redis_client: redis.Redis, namespace: str = "aeronaves"):
        """Initialize AeronaveStore with Redis client and collection namespace"""
        self.redis = redis_client
        self.prefix = f"{namespace}:aeronave:"
        # SCAN MATCH is a glob, the namespace must only ever match itself
        self.match = re.sub(r"([\\*?\[\]])", r"\\\1", self.prefix) + "*"

    def key(self, aeronave_id: str) -> str:
        return f"{self.prefix}{aeronave_id}"

    async def find_all(self) -> list[Aeronave]:
        """Fetch every record, in storage-native order"""
        keys = [k async for k in self.redis.scan_iter(match=self.match)]
        if not keys:
            return []
        values = await self.redis.mget(keys)
        # A key deleted between SCAN and MGET comes back as None
        return [aeronave for k, d in zip(keys, values)
                if (aeronave := json_to_aeronave(k[len(self.prefix):], d)) is not None]

    async def find_by_id(self, aeronave_id: str) -> Aeronave | None:
        return json_to_aeronave(aeronave_id, await self.redis.get(self.key(aeronave_id)))

    async def insert(self, document: AeronaveDocument) -> Aeronave:
        """Allocate a new identifier and persist the document under it"""
        aeronave_id = uuid4().hex
        if not await self.redis.set(self.key(aeronave_id), aeronave_to_json(document), nx=True):
            raise RuntimeError(f"Aeronave with id {aeronave_id} already exists")
        return document_to_aeronave(aeronave_id, document)

    async def find_and_replace(self, aeronave_id: str, changes: dict) -> Aeronave | None:
        """
        Replace the given fields on an existing record.

        The merged document is validated against AeronaveDocument before it is
        written, raising pydantic.ValidationError when a constraint fails.

        Returns:
            The post-update Aeronave, or None if no record matches aeronave_id
        """
        current = await self.redis.get(self.key(aeronave_id))
        if current is None:
            return None

        merged = AeronaveDocument.model_validate_json(current).model_dump()
        merged.update(changes)
        document = AeronaveDocument.model_validate(merged)

        # XX: never resurrect a record deleted since the read above
        if not await self.redis.set(self.key(aeronave_id), aeronave_to_json(document), xx=True):
            return None
        return document_to_aeronave(aeronave_id, document)

    async def find_and_delete(self, aeronave_id: str) -> Aeronave | None:
        """Remove a record and return its last state, or None if it did not exist"""
        return json_to_aeronave(aeronave_id, await self.redis.getdel(self.key(aeronave_id)))
