"""
Report Routes
Reporting poems and moderating reports
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from typing import List
import logging

from shared.schemas.report import ReportCreateSchema, ReportSchema
from shared.utils.logger import get_audit_logger

from app.utils.dependencies import ModerationServiceDep, CurrentUser, AdminUser
from app.utils.exceptions import StoreError

logger = logging.getLogger(__name__)
audit_logger = get_audit_logger()

router = APIRouter()


@router.post("/report", response_model=dict)
async def report_poem(report_data: ReportCreateSchema, moderation_service: ModerationServiceDep, current_user: CurrentUser):
    try:
        await moderation_service.report_poem(
            report_data.poem_id,
            report_data.reported_by,
            report_data.reason
        )
        return {"success": True}
    except StoreError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False}
        )


@router.get("/reports", response_model=List[ReportSchema])
async def list_reports(moderation_service: ModerationServiceDep, admin_user: AdminUser):
    """Reports with reporter name and poem title, newest first"""
    return await moderation_service.list_reports()


@router.delete("/reports/{report_id}", response_model=dict)
async def delete_report(report_id: int, moderation_service: ModerationServiceDep, admin_user: AdminUser):
    try:
        await moderation_service.delete_report(report_id)
    except StoreError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False}
        )

    audit_logger.log_user_action(
        admin_user.get('id') if admin_user else None, "delete", "report", report_id
    )
    return {"success": True}
