# /app/services/dashboard_service.py

import logging

from ..models.dashboard_model import DashboardSummary
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def get_summary_data(db: DatabaseService) -> DashboardSummary:
    """
    Calculates the dashboard summary statistics from the data access layer.
    """
    try:
        _, faculty_count = db.list_faculty(skip=0, limit=1)
        return DashboardSummary(
            departmentCount=len(db.get_all_departments()),
            courseCount=len(db.get_all_courses()),
            facultyCount=faculty_count,
            classCount=len(db.get_all_classes()),
            studentCount=db.count_students(),
        )
    except Exception:
        logger.exception("Failed to calculate dashboard summary")
        # Re-raised so the global handler answers with a 500.
        raise
