# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Ghost-net endpoints – list, submit, status transitions, history, export.

Attribution
-----------
A submission carrying an ``X-User-Id`` header is attributed to that user;
without it the report is anonymous.  The header is taken as-is.
"""

import io
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from sqlalchemy.orm import Session

from database import get_db
from core.security import get_acting_user_id, get_client_ip
from ghostnets.service import GhostNetRegistry, TransitionActors
from models.ghost_net import GhostNetStatus
from repositories.audit_log_repository import AuditLogRepository
from repositories.ghost_net_repository import GhostNetRepository
from ghostnets.schemas import (
    GhostNetHistoryResponse,
    GhostNetRequest,
    GhostNetResponse,
    GhostNetRow,
    UpdateGhostNetStatusRequest,
)

router = APIRouter(prefix="/api/ghostnets", tags=["ghostnets"])


def get_registry(db: Session = Depends(get_db)) -> GhostNetRegistry:
    return GhostNetRegistry(GhostNetRepository(db))


# ---------------------------------------------------------------------------
# GET /api/ghostnets  – list all reports
# ---------------------------------------------------------------------------


@router.get("", response_model=List[GhostNetRow])
def list_ghost_nets(registry: GhostNetRegistry = Depends(get_registry)):
    return registry.list_reports()


# ---------------------------------------------------------------------------
# POST /api/ghostnets/add  – submit a new report
# ---------------------------------------------------------------------------


@router.post("/add", response_model=GhostNetResponse)
def add_ghost_net(
    body: GhostNetRequest,
    request: Request,
    acting_user_id: Optional[int] = Depends(get_acting_user_id),
    registry: GhostNetRegistry = Depends(get_registry),
    db: Session = Depends(get_db),
):
    """Any ``status`` in the body is ignored; new reports start as REPORTED."""
    net = registry.submit(body.latitude, body.longitude, body.size, acting_user_id)
    AuditLogRepository(db).record(
        "submit_report",
        actor_id=acting_user_id,
        ghost_net_id=net.id,
        detail=f"lat={net.latitude} lon={net.longitude}",
        request_ip=get_client_ip(request),
    )
    return net


# ---------------------------------------------------------------------------
# PATCH /api/ghostnets/{id}/status  – lifecycle transition
# ---------------------------------------------------------------------------


@router.patch("/{ghost_net_id}/status", response_model=GhostNetRow)
def update_ghost_net_status(
    ghost_net_id: int,
    body: UpdateGhostNetStatusRequest,
    request: Request,
    acting_user_id: Optional[int] = Depends(get_acting_user_id),
    registry: GhostNetRegistry = Depends(get_registry),
    db: Session = Depends(get_db),
):
    actors = TransitionActors(
        scheduled_by=body.scheduled_by_user_id,
        recovered_by=body.recovered_by_user_id,
        cancelled_by=body.cancelled_by_user_id,
    )
    net = registry.update_status(ghost_net_id, body.status, actors)

    # Audit actor: the header if present, else whoever the body names for
    # the target status.
    actor_id = acting_user_id
    if actor_id is None:
        actor_id = {
            GhostNetStatus.SCHEDULED: actors.scheduled_by,
            GhostNetStatus.RECOVERED: actors.recovered_by,
            GhostNetStatus.CANCELLED: actors.cancelled_by,
        }.get(net.status)

    AuditLogRepository(db).record(
        "update_status",
        actor_id=actor_id,
        ghost_net_id=net.id,
        detail=f"status={net.status.value}",
        request_ip=get_client_ip(request),
    )
    return net


# ---------------------------------------------------------------------------
# GET /api/ghostnets/export  – download all reports as Excel
# ---------------------------------------------------------------------------

_HEADER_FONT  = Font(name="Calibri", size=11, bold=True, color="FFFFFF")
_HEADER_FILL  = PatternFill(start_color="1F6F8B", end_color="1F6F8B", fill_type="solid")
_HEADER_ALIGN = Alignment(horizontal="center", vertical="center")
_THIN_BORDER  = Border(
    left=Side(style="thin", color="CCCCCC"),
    right=Side(style="thin", color="CCCCCC"),
    top=Side(style="thin", color="CCCCCC"),
    bottom=Side(style="thin", color="CCCCCC"),
)

EXPORT_HEADERS = [
    "ID", "Latitude", "Longitude", "Size", "Status",
    "Reported By", "Reported At",
    "Scheduled By", "Scheduled At",
    "Recovered By", "Recovered At",
    "Cancelled By", "Cancelled At",
]
_COL_WIDTHS = [8, 12, 12, 10, 12, 12, 20, 12, 20, 12, 20, 12, 20]


def _fmt(ts) -> str:
    return ts.strftime("%Y-%m-%d %H:%M:%S") if ts else ""


def _opt(value):
    return "" if value is None else value


@router.get("/export")
def export_ghost_nets(registry: GhostNetRegistry = Depends(get_registry)):
    """Export every report, one row per net, as an xlsx workbook."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Ghost Nets"

    ws.append(EXPORT_HEADERS)
    for cell in ws[1]:
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL
        cell.alignment = _HEADER_ALIGN
        cell.border = _THIN_BORDER

    for net in registry.list_reports():
        ws.append([
            net.id,
            net.latitude,
            net.longitude,
            _opt(net.size),
            net.status.value,
            _opt(net.reported_by),
            _fmt(net.reported_at),
            _opt(net.scheduled_by),
            _fmt(net.scheduled_at),
            _opt(net.recovered_by),
            _fmt(net.recovered_at),
            _opt(net.cancelled_by),
            _fmt(net.cancelled_at),
        ])
        row_idx = ws.max_row
        for col_idx in range(1, len(EXPORT_HEADERS) + 1):
            ws.cell(row=row_idx, column=col_idx).border = _THIN_BORDER

    for col_idx, width in enumerate(_COL_WIDTHS, start=1):
        ws.column_dimensions[chr(64 + col_idx)].width = width

    buf = io.BytesIO()
    wb.save(buf)
    buf.seek(0)
    wb.close()

    return StreamingResponse(
        buf,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": 'attachment; filename="ghost-nets.xlsx"'},
    )


# ---------------------------------------------------------------------------
# GET /api/ghostnets/{id}/history  – audit trail of one report
# ---------------------------------------------------------------------------


@router.get("/{ghost_net_id}/history", response_model=GhostNetHistoryResponse)
def ghost_net_history(
    ghost_net_id: int,
    registry: GhostNetRegistry = Depends(get_registry),
    db: Session = Depends(get_db),
):
    registry.get_report(ghost_net_id)
    events = AuditLogRepository(db).find_by_ghost_net(ghost_net_id)
    return GhostNetHistoryResponse(ghost_net_id=ghost_net_id, events=events)
