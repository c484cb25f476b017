# /app/services/database_helpers/faculty_repository_sql.py

from typing import Dict, List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.db.models.faculty_model import Faculty


def _contains_pattern(text: str) -> str:
    """Builds a LIKE pattern that matches `text` literally anywhere in a value."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class FacultyRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def list_faculty(
        self,
        skip: int,
        limit: int,
        search: Optional[str] = None,
        department_id: Optional[str] = None
    ) -> Tuple[List[Faculty], int]:
        """
        Returns one page of faculty plus the total number of matching rows.

        `search` is a case-insensitive substring match on name OR email;
        `department_id` is an exact match. When both are given they are
        combined with AND. Rows are ordered by name.
        """
        query = self.db.query(Faculty)
        if search:
            pattern = _contains_pattern(search)
            query = query.filter(
                or_(
                    Faculty.name.ilike(pattern, escape="\\"),
                    Faculty.email.ilike(pattern, escape="\\"),
                )
            )
        if department_id:
            query = query.filter(Faculty.department_id == department_id)

        total = query.count()
        rows = (
            query.options(joinedload(Faculty.department))
            .order_by(Faculty.name.asc(), Faculty.id.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return rows, total

    def get_faculty_by_id(self, faculty_id: str) -> Optional[Faculty]:
        return (
            self.db.query(Faculty)
            .options(joinedload(Faculty.department))
            .filter(Faculty.id == faculty_id)
            .first()
        )

    def get_faculty_by_email(self, email: str) -> Optional[Faculty]:
        return self.db.query(Faculty).filter(Faculty.email == email).first()

    def add_faculty(self, record: Dict) -> Faculty:
        new_faculty = Faculty(**record)
        self.db.add(new_faculty)
        self.db.commit()
        self.db.refresh(new_faculty)
        return new_faculty

    def update_faculty(self, faculty_id: str, data: Dict) -> Optional[Faculty]:
        db_faculty = self.get_faculty_by_id(faculty_id)
        if db_faculty:
            for key, value in data.items():
                setattr(db_faculty, key, value)
            self.db.commit()
            self.db.refresh(db_faculty)
        return db_faculty

    def delete_faculty(self, faculty_id: str) -> bool:
        db_faculty = self.db.query(Faculty).filter(Faculty.id == faculty_id).first()
        if db_faculty:
            self.db.delete(db_faculty)
            self.db.commit()
            return True
        return False
