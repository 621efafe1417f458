"""
Base pydantic model for request/response bodies.

Bodies are read from snake_case names and, for compatibility with older
clients, from their camelCase spelling. Responses are always snake_case.
"""

from __future__ import annotations

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GitMinerModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=to_camel),
        populate_by_name=True,
    )
