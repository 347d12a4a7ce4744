# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Ghost-net registry – report submission and the status lifecycle.

Lifecycle
---------
    REPORTED ──► SCHEDULED ──► RECOVERED
         └──────────┴────────► CANCELLED

The arrows show the usual path only: no source-state guard exists and any
status may follow any other.  Each target status except REPORTED owns an
(actor, timestamp) pair:

    SCHEDULED   scheduled_by / scheduled_at
    RECOVERED   recovered_by / recovered_at
    CANCELLED   cancelled_by / cancelled_at

Entering the status records the actor when one is supplied and stamps the
time unless the net was already in that status with a timestamp set, so
re-confirming a status keeps the original time.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from core.errors import NotFoundError, ValidationError
from core.logger import logger
from models.ghost_net import GhostNet, GhostNetStatus
from repositories.ghost_net_repository import GhostNetRepository

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


@dataclass(frozen=True)
class TransitionActors:
    """Who performed a transition; each field is optional and independent."""

    scheduled_by: Optional[int] = None
    recovered_by: Optional[int] = None
    cancelled_by: Optional[int] = None


# target status → (actor field, timestamp field).  Actor field names are
# shared between TransitionActors and GhostNet.
_TRANSITION_FIELDS = {
    GhostNetStatus.SCHEDULED: ("scheduled_by", "scheduled_at"),
    GhostNetStatus.RECOVERED: ("recovered_by", "recovered_at"),
    GhostNetStatus.CANCELLED: ("cancelled_by", "cancelled_at"),
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_in_range(value: Optional[float], bounds: tuple, field: str) -> float:
    low, high = bounds
    if value is None:
        raise ValidationError(f"Field '{field}' must not be null")
    if math.isnan(value) or not (low <= value <= high):
        raise ValidationError(f"Field '{field}' outside allowed range [{low}, {high}]: {value}")
    return value


class GhostNetRegistry:

    def __init__(self, repository: GhostNetRepository):
        self.repository = repository

    def list_reports(self) -> List[GhostNet]:
        return self.repository.find_all()

    def get_report(self, report_id: int) -> GhostNet:
        net = self.repository.find_by_id(report_id)
        if net is None:
            raise NotFoundError(f"GhostNet not found: {report_id}")
        return net

    def submit(
        self,
        latitude: Optional[float],
        longitude: Optional[float],
        size: Optional[float] = None,
        reporter_id: Optional[int] = None,
    ) -> GhostNet:
        """
        Record a new sighting.  The status always starts at REPORTED;
        *reporter_id* of None makes the report anonymous.
        """
        try:
            latitude = _require_in_range(latitude, LATITUDE_RANGE, "latitude")
            longitude = _require_in_range(longitude, LONGITUDE_RANGE, "longitude")
        except ValidationError as exc:
            logger.warning("Report rejected: %s", exc.message)
            raise

        now = _now()
        net = GhostNet(
            latitude=latitude,
            longitude=longitude,
            size=size,
            status=GhostNetStatus.REPORTED,
            reported_by=reporter_id,
            reported_at=now,
            created_at=now,
        )
        net = self.repository.save(net)
        logger.info(
            "GhostNet id=%d reported at (%s, %s) by %s",
            net.id, net.latitude, net.longitude,
            reporter_id if reporter_id is not None else "anonymous",
        )
        return net

    def update_status(
        self,
        report_id: int,
        new_status: Optional[GhostNetStatus],
        actors: TransitionActors = TransitionActors(),
    ) -> GhostNet:
        if new_status is None:
            raise ValidationError("Field 'status' must not be null")

        net = self.get_report(report_id)

        old_status = net.status
        now = _now()
        net.status = new_status
        net.updated_at = now

        fields = _TRANSITION_FIELDS.get(new_status)
        if fields:
            actor_field, at_field = fields
            actor_id = getattr(actors, actor_field)
            if actor_id is not None:
                setattr(net, actor_field, actor_id)
            if old_status != new_status or getattr(net, at_field) is None:
                setattr(net, at_field, now)

        net = self.repository.save(net)
        logger.info(
            "GhostNet id=%d status %s -> %s",
            net.id, old_status.value, new_status.value,
        )
        return net
