# /app/db/models/academic_models.py

"""
SQLAlchemy ORM models for the academic catalog: departments, batches,
courses, and the course allocations that tie a course, a faculty member and
a class together.
"""

from sqlalchemy import Column, String, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base


class Department(Base):
    __tablename__ = "departments"

    id = Column(String, primary_key=True, index=True)
    code = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)

    classes = relationship("Class", back_populates="department")
    courses = relationship("Course", back_populates="department")
    faculty = relationship("Faculty", back_populates="department")


class Batch(Base):
    """An admission cohort, e.g. "2022-2026"."""
    __tablename__ = "batches"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    start_year = Column(Integer, nullable=True)
    end_year = Column(Integer, nullable=True)

    classes = relationship("Class", back_populates="batch")


class Course(Base):
    """
    A catalog course. `code` is the business key and never changes once the
    record exists.
    """
    __tablename__ = "courses"

    id = Column(String, primary_key=True, index=True)
    code = Column(String, unique=True, index=True, nullable=False)
    title = Column(String, nullable=False)
    credits = Column(Integer, nullable=False, default=3)
    category = Column(String, nullable=False, default="Core")
    description = Column(Text, nullable=True)
    semester = Column(Integer, nullable=False, default=1)
    department_id = Column(String, ForeignKey("departments.id"), nullable=True, index=True)

    department = relationship("Department", back_populates="courses")
    allocations = relationship("CourseAllocation", back_populates="course", cascade="all, delete-orphan")


class CourseAllocation(Base):
    """Records that a faculty member teaches a course to a class."""
    __tablename__ = "course_allocations"

    id = Column(String, primary_key=True, index=True)
    course_id = Column(String, ForeignKey("courses.id"), nullable=False, index=True)
    faculty_id = Column(String, ForeignKey("faculty.id"), nullable=False, index=True)
    class_id = Column(String, ForeignKey("classes.id"), nullable=False, index=True)
    academic_year = Column(String, nullable=True)

    course = relationship("Course", back_populates="allocations")
    faculty = relationship("Faculty", back_populates="allocations")
    class_ = relationship("Class", back_populates="allocations")
