"""
Student/Course many-to-many.

Student owns the course_student join table; rows in it go away with either
side. The relationship is treated as a set, so callers should not rely on
collection order.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin

course_student = Table(
    "course_student",
    Base.metadata,
    Column("student_id", Integer, ForeignKey("students.id", ondelete="CASCADE"), primary_key=True),
    Column("course_id", Integer, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True),
)


class Student(Base, TimestampMixin):
    __tablename__ = "students"

    name = Column(String(255), nullable=True)
    roll_no = Column(String(64), nullable=True)

    # Relationships
    courses = relationship("Course", secondary=course_student, back_populates="students", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, name={self.name}, roll_no={self.roll_no})>"


class Course(Base, TimestampMixin):
    __tablename__ = "courses"

    name = Column(String(255), nullable=True)

    # Relationships
    students = relationship("Student", secondary=course_student, back_populates="courses", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Course(id={self.id}, name={self.name})>"
