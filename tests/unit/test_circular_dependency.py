from __future__ import annotations

import importlib
import sys

import pytest


@pytest.mark.parametrize("entry_module", [
    "aeronave_gateway.aeronave_store",
    "aeronave_gateway.aeronave_controller",
    "aeronave_gateway.helpers.deserializers",
    "aeronave_gateway.api",
])
def test_modules_import_from_a_cold_start(entry_module, monkeypatch):
    """
    Verifies the api package can be reached from any entry point.

    Importing the store first pulls in api.types, which runs api/__init__.py
    and therefore api/schema.py:

        aeronave_store.py -> helpers/deserializers.py -> api/types.py -> api/schema.py

    schema.py only names AeronaveStore and AeronaveController under
    TYPE_CHECKING, so the partially initialized store module is never read.
    """
    for name in list(sys.modules):
        if name == "aeronave_gateway" or name.startswith("aeronave_gateway."):
            monkeypatch.delitem(sys.modules, name)

    module = importlib.import_module(entry_module)
    assert module is not None

    from aeronave_gateway.api import schema
    assert "createAeronave" in str(schema)
