# /app/routers/dashboard_router.py

from fastapi import APIRouter, Depends

from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.dashboard_model import DashboardSummary

router = APIRouter()


@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Retrieves record counts for the admin dashboard."
)
def get_dashboard_summary(db: DatabaseService = Depends(get_db_service)):
    # Thin router: delegate straight to the service layer.
    return dashboard_service.get_summary_data(db=db)
