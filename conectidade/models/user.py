from sqlalchemy import CheckConstraint, Column, Integer, String, Text
from sqlalchemy.orm import relationship

from conectidade.database import Base


# ---------------- USER (AUTH TABLE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    username = Column(Text, unique=True, index=True, nullable=False)
    password = Column(Text, nullable=False)
    user_type = Column(String(10), nullable=False, default="learn", server_default="learn")

    __table_args__ = (
        CheckConstraint("user_type IN ('learn', 'teach', 'both')", name="check_user_type"),
    )

    user_skills = relationship("UserSkill", back_populates="user", cascade="all, delete-orphan")
    teaching_connections = relationship(
        "Connection", foreign_keys="Connection.teacher_id", back_populates="teacher"
    )
    learning_connections = relationship(
        "Connection", foreign_keys="Connection.student_id", back_populates="student"
    )
