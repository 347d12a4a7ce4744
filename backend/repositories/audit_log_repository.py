# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""Data access for the audit_logs table."""

from typing import List, Optional

from models.audit_log import AuditLog
from repositories.base import Repository


class AuditLogRepository(Repository[AuditLog]):
    model = AuditLog

    def record(
        self,
        action: str,
        actor_id: Optional[int] = None,
        ghost_net_id: Optional[int] = None,
        target_user_id: Optional[int] = None,
        detail: Optional[str] = None,
        request_ip: Optional[str] = None,
    ) -> AuditLog:
        return self.save(AuditLog(
            action=action,
            actor_id=actor_id,
            ghost_net_id=ghost_net_id,
            target_user_id=target_user_id,
            detail=detail,
            request_ip=request_ip,
        ))

    def find_by_ghost_net(self, ghost_net_id: int) -> List[AuditLog]:
        """Audit trail for one report, newest first."""
        return (
            self.db.query(AuditLog)
            .filter(AuditLog.ghost_net_id == ghost_net_id)
            .order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
            .all()
        )
