# Copyright (c) 2026 StorageOS Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Shared pieces of the API resource models."""

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field


class Resource(BaseModel):
    """Base for records decoded from StorageOS API responses.

    Wire keys are camelCase; Python attributes are snake_case. Fields the CLI
    does not know about are ignored so newer API versions still decode.
    """

    model_config = {"populate_by_name": True, "extra": "ignore"}


class Timestamped(Resource):
    """Resources the API stamps with creation, update and CAS version info."""

    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    version: str = Field(default="", description="Opaque CAS version token")


Labels = Dict[str, str]
