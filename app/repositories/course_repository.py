"""Student and course repositories."""

from app.models.course import Course, Student
from app.repositories.base import CrudRepository


class StudentRepository(CrudRepository[Student]):
    model_class = Student


class CourseRepository(CrudRepository[Course]):
    model_class = Course
