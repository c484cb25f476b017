# /app/services/database_helpers/class_student_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Class and
Student tables. It is the direct interface to the database for all roster
data.
"""

from typing import List, Dict, Optional
from sqlalchemy.orm import Session, joinedload

# Import the SQLAlchemy models this repository will interact with.
from app.db.models.class_student_models import Class, Student


class ClassStudentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Class Methods ---

    def get_all_classes(self) -> List[Class]:
        """Retrieves every class with its department and batch loaded."""
        return (
            self.db.query(Class)
            .options(joinedload(Class.department), joinedload(Class.batch))
            .order_by(Class.name)
            .all()
        )

    def get_class_by_id(self, class_id: str) -> Optional[Class]:
        return (
            self.db.query(Class)
            .options(joinedload(Class.department), joinedload(Class.batch))
            .filter(Class.id == class_id)
            .first()
        )

    def add_class(self, record: Dict) -> Class:
        new_class = Class(**record)
        self.db.add(new_class)
        self.db.commit()
        self.db.refresh(new_class)
        return new_class

    def delete_class(self, class_id: str) -> bool:
        db_class = self.db.query(Class).filter(Class.id == class_id).first()
        if db_class:
            # The cascade defined on the model removes students and allocations.
            self.db.delete(db_class)
            self.db.commit()
            return True
        return False

    # --- Student Methods ---

    def get_students_by_class_id(self, class_id: str) -> List[Student]:
        """Retrieves the roster of a class ordered by roll number."""
        return (
            self.db.query(Student)
            .filter(Student.class_id == class_id)
            .order_by(Student.roll_no)
            .all()
        )

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def count_students(self) -> int:
        return self.db.query(Student).count()

    def get_student_by_roll_no(self, roll_no: str) -> Optional[Student]:
        """
        Retrieves a student by their roll number. Roll numbers are unique
        across the entire college.
        """
        return self.db.query(Student).filter(Student.roll_no == roll_no).first()

    def add_student(self, record: Dict) -> Student:
        new_student = Student(**record)
        self.db.add(new_student)
        self.db.commit()
        self.db.refresh(new_student)
        return new_student

    def update_student(self, student_id: str, data: Dict) -> Optional[Student]:
        db_student = self.get_student_by_id(student_id)
        if db_student:
            for key, value in data.items():
                setattr(db_student, key, value)
            self.db.commit()
            self.db.refresh(db_student)
        return db_student

    def delete_student(self, student_id: str) -> bool:
        db_student = self.get_student_by_id(student_id)
        if db_student:
            self.db.delete(db_student)
            self.db.commit()
            return True
        return False
