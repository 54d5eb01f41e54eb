# conectidade/models/connection.py
from sqlalchemy import TIMESTAMP, CheckConstraint, Column, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from conectidade.database import Base


class Connection(Base):
    __tablename__ = "connections"

    id = Column(Integer, primary_key=True, index=True)
    teacher_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="pending", server_default="pending")
    message = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="check_connection_status",
        ),
    )

    # Relationships
    teacher = relationship("User", foreign_keys=[teacher_id], back_populates="teaching_connections")
    student = relationship("User", foreign_keys=[student_id], back_populates="learning_connections")
