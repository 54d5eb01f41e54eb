from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from conectidade.database import Base


# conectidade/models/skill.py
class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    # Free-text grouping key; not a foreign key to categories.
    category = Column(Text, nullable=False, index=True)
    description = Column(Text)
    icon_name = Column(Text)

    user_skills = relationship("UserSkill", back_populates="skill", cascade="all, delete-orphan")


class UserSkill(Base):
    __tablename__ = "user_skills"

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    skill_id = Column(
        Integer,
        ForeignKey("skills.id", ondelete="CASCADE"),
        primary_key=True,
    )
    is_teaching = Column(Boolean, nullable=False, default=False)
    is_learning = Column(Boolean, nullable=False, default=False)
    level = Column(String(20), nullable=False, default="beginner")

    __table_args__ = (
        CheckConstraint(
            "level IN ('beginner', 'intermediate', 'advanced')",
            name="check_user_skill_level",
        ),
    )

    # Relationships
    skill = relationship("Skill", back_populates="user_skills")
    user = relationship("User", back_populates="user_skills")
