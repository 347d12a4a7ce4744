# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the ghost-net endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from models.ghost_net import GhostNetStatus


# -- Requests --------------------------------------------------------------


class GhostNetRequest(BaseModel):
    # Range checks happen in GhostNetRegistry.submit so that a missing or
    # out-of-range coordinate yields a field-qualified 400.
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    size: Optional[float] = Field(
        None, validation_alias=AliasChoices("size", "depth_meters")
    )
    # Unknown keys such as "status" are ignored: new reports start as REPORTED.


class UpdateGhostNetStatusRequest(BaseModel):
    status: Optional[GhostNetStatus] = None
    scheduled_by_user_id: Optional[int] = None
    recovered_by_user_id: Optional[int] = None
    cancelled_by_user_id: Optional[int] = None


# -- Responses -------------------------------------------------------------


class GhostNetResponse(BaseModel):
    id: int
    latitude: float
    longitude: float
    size: Optional[float] = None
    status: GhostNetStatus

    model_config = {"from_attributes": True}


class GhostNetRow(GhostNetResponse):
    reported_by: Optional[int] = None
    reported_at: Optional[datetime] = None
    scheduled_by: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    recovered_by: Optional[int] = None
    recovered_at: Optional[datetime] = None
    cancelled_by: Optional[int] = None
    cancelled_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


# -- Audit log responses ---------------------------------------------------


class GhostNetHistoryRow(BaseModel):
    id: int
    actor_id: Optional[int] = None
    action: str
    detail: Optional[str] = None
    request_ip: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class GhostNetHistoryResponse(BaseModel):
    ghost_net_id: int
    events: List[GhostNetHistoryRow]
