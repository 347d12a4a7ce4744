# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""AuditLog ORM model – one row per successful mutating request."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from sqlalchemy.sql import func

from database import Base


class AuditLog(Base):
    __tablename__ = "audit_logs"
    # index names match migrations/versions/0002_audit_logs.py
    __table_args__ = (
        Index("idx_audit_logs_actor_id", "actor_id"),
        Index("idx_audit_logs_ghost_net_id", "ghost_net_id"),
        Index("idx_audit_logs_target_user_id", "target_user_id"),
        Index("idx_audit_logs_action", "action"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # The user who performed the action (X-User-Id or the transition actor)
    actor_id = Column(Integer, nullable=True)
    ghost_net_id = Column(Integer, nullable=True)
    # The account the action was about (register / login / profile update)
    target_user_id = Column(Integer, nullable=True)
    action = Column(String(64), nullable=False)   # e.g. "update_status"
    detail = Column(Text, nullable=True)                      # human-readable note
    request_ip = Column(String(45), nullable=True)            # Client IP address (supports IPv6)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
