# /app/db/models/class_student_models.py

"""
This module defines the SQLAlchemy ORM models for the `Class` and `Student`
entities. A class is one section of a department's batch; every student
belongs to exactly one class.
"""

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base


class Class(Base):
    """
    SQLAlchemy model representing a class section, e.g. "CSE - 2022 - Section A".
    """
    __tablename__ = "classes"

    id = Column(String, primary_key=True, index=True)
    # The section name ("A", "B", ...).
    name = Column(String, index=True, nullable=False)
    department_id = Column(String, ForeignKey("departments.id"), nullable=True, index=True)
    batch_id = Column(String, ForeignKey("batches.id"), nullable=True, index=True)

    department = relationship("Department", back_populates="classes")
    batch = relationship("Batch", back_populates="classes")

    # When a Class is deleted, its students and allocations go with it.
    students = relationship("Student", back_populates="class_", cascade="all, delete-orphan")
    allocations = relationship("CourseAllocation", back_populates="class_", cascade="all, delete-orphan")


class Student(Base):
    """
    SQLAlchemy model representing a single student within a Class.
    """
    __tablename__ = "students"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    roll_no = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, nullable=False)
    guardian_mobile = Column(String, nullable=True)

    class_id = Column(String, ForeignKey("classes.id"), nullable=False, index=True)
    class_ = relationship("Class", back_populates="students")
