# /app/services/database_helpers/catalog_repository_sql.py

"""
SQLAlchemy queries for the academic catalog: departments, batches, courses
and course allocations.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session, joinedload

from app.db.models.academic_models import Batch, Course, CourseAllocation, Department
from app.db.models.class_student_models import Class
from app.db.models.faculty_model import Faculty


class CatalogRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def _add(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def _delete(self, obj) -> bool:
        if obj is None:
            return False
        self.db.delete(obj)
        self.db.commit()
        return True

    # --- Department Methods ---

    def get_all_departments(self) -> List[Department]:
        return self.db.query(Department).order_by(Department.code).all()

    def get_department_by_id(self, department_id: str) -> Optional[Department]:
        return self.db.query(Department).filter(Department.id == department_id).first()

    def get_department_by_code(self, code: str) -> Optional[Department]:
        return self.db.query(Department).filter(Department.code == code).first()

    def add_department(self, record: Dict) -> Department:
        return self._add(Department(**record))

    def delete_department(self, department_id: str) -> bool:
        return self._delete(self.get_department_by_id(department_id))

    # --- Batch Methods ---

    def get_all_batches(self) -> List[Batch]:
        return self.db.query(Batch).order_by(Batch.name).all()

    def get_batch_by_id(self, batch_id: str) -> Optional[Batch]:
        return self.db.query(Batch).filter(Batch.id == batch_id).first()

    def add_batch(self, record: Dict) -> Batch:
        return self._add(Batch(**record))

    def delete_batch(self, batch_id: str) -> bool:
        return self._delete(self.get_batch_by_id(batch_id))

    # --- Course Methods ---

    def get_all_courses(self) -> List[Course]:
        return (
            self.db.query(Course)
            .options(joinedload(Course.department))
            .order_by(Course.code)
            .all()
        )

    def get_course_by_id(self, course_id: str) -> Optional[Course]:
        return (
            self.db.query(Course)
            .options(joinedload(Course.department))
            .filter(Course.id == course_id)
            .first()
        )

    def get_course_by_code(self, code: str) -> Optional[Course]:
        return self.db.query(Course).filter(Course.code == code).first()

    def add_course(self, record: Dict) -> Course:
        return self._add(Course(**record))

    def update_course(self, course_id: str, data: Dict) -> Optional[Course]:
        db_course = self.get_course_by_id(course_id)
        if db_course:
            for key, value in data.items():
                setattr(db_course, key, value)
            self.db.commit()
            self.db.refresh(db_course)
        return db_course

    def delete_course(self, course_id: str) -> bool:
        return self._delete(self.db.query(Course).filter(Course.id == course_id).first())

    # --- Course Allocation Methods ---

    def get_allocations(
        self,
        faculty_id: Optional[str] = None,
        class_id: Optional[str] = None,
        course_id: Optional[str] = None
    ) -> List[CourseAllocation]:
        """
        Retrieves allocations matching every given equality filter, with the
        course, faculty member and class (plus the class's department and
        batch) loaded for population.
        """
        query = self.db.query(CourseAllocation).options(
            joinedload(CourseAllocation.course).joinedload(Course.department),
            joinedload(CourseAllocation.faculty).joinedload(Faculty.department),
            joinedload(CourseAllocation.class_).joinedload(Class.department),
            joinedload(CourseAllocation.class_).joinedload(Class.batch),
        )
        if faculty_id:
            query = query.filter(CourseAllocation.faculty_id == faculty_id)
        if class_id:
            query = query.filter(CourseAllocation.class_id == class_id)
        if course_id:
            query = query.filter(CourseAllocation.course_id == course_id)
        return query.order_by(CourseAllocation.id).all()

    def get_allocation_by_id(self, allocation_id: str) -> Optional[CourseAllocation]:
        return self.db.query(CourseAllocation).filter(CourseAllocation.id == allocation_id).first()

    def add_allocation(self, record: Dict) -> CourseAllocation:
        return self._add(CourseAllocation(**record))

    def delete_allocation(self, allocation_id: str) -> bool:
        return self._delete(self.get_allocation_by_id(allocation_id))
