# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""GhostNet ORM model – one reported net and its lifecycle audit fields."""

import enum

from sqlalchemy import Column, Integer, Float, Enum, DateTime, Index

from database import Base


class GhostNetStatus(str, enum.Enum):
    REPORTED = "REPORTED"    # reported, nobody assigned yet
    SCHEDULED = "SCHEDULED"  # recovery announced by a salvor
    RECOVERED = "RECOVERED"  # salvaged
    CANCELLED = "CANCELLED"  # lost / recovery abandoned


class GhostNet(Base):
    __tablename__ = "ghost_nets"
    # index names match migrations/versions/0001_initial.py
    __table_args__ = (
        Index("idx_ghost_nets_status", "status"),
        Index("idx_ghost_nets_reported_by", "reported_by"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    size = Column(Float, nullable=True)  # size or depth, unit left to the reporter
    status = Column(
        Enum(GhostNetStatus, name="ghost_net_status"),
        nullable=False,
        default=GhostNetStatus.REPORTED,
    )

    # Actor references are plain user ids (no FK): the users table is not
    # consulted when a report is attributed.  NULL reported_by = anonymous.
    reported_by = Column(Integer, nullable=True)
    reported_at = Column(DateTime(timezone=True), nullable=True)

    scheduled_by = Column(Integer, nullable=True)
    scheduled_at = Column(DateTime(timezone=True), nullable=True)

    recovered_by = Column(Integer, nullable=True)
    recovered_at = Column(DateTime(timezone=True), nullable=True)

    cancelled_by = Column(Integer, nullable=True)
    cancelled_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False)
    # NULL until the first status update
    updated_at = Column(DateTime(timezone=True), nullable=True)
