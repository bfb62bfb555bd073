# dojo_api/routers/reports.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.deps import get_current_user, require_instructor
from ..schemas.report_schemas import ReportSummary
from ..services.report_service import ReportService

router = APIRouter(
    prefix="/api/reports",
    tags=["reports"],
    dependencies=[Depends(get_current_user), Depends(require_instructor)],
)


@router.get("/summary", response_model=ReportSummary)
async def get_summary(db: AsyncSession = Depends(get_db)):
    """Member, belt, class and attendance counts"""
    service = ReportService(db)
    return await service.get_summary()
