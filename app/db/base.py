# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees
# that Base.metadata knows every table before `create_all` runs.

from .base_class import Base

from .models.academic_models import Department, Batch, Course, CourseAllocation
from .models.class_student_models import Class, Student
from .models.faculty_model import Faculty
