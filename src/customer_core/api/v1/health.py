# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Liveness endpoint."""

from beartype import beartype
from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

router = APIRouter()


class HealthStatus(BaseModel):
    """Health check response."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: str = Field(default="healthy", description="Service status")


@router.get("/health")
@beartype
async def health_check() -> HealthStatus:
    """Report that the service is up."""
    return HealthStatus()
