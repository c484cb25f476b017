# /app/db/models/faculty_model.py

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base


class Faculty(Base):
    """
    SQLAlchemy model for a faculty member.

    `password` only ever holds a bcrypt hash. It is never serialized into an
    API response.
    """
    __tablename__ = "faculty"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    designation = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    department_id = Column(String, ForeignKey("departments.id"), nullable=True, index=True)

    department = relationship("Department", back_populates="faculty")
    allocations = relationship("CourseAllocation", back_populates="faculty", cascade="all, delete-orphan")
