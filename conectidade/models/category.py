from sqlalchemy import Column, Integer, Text

from conectidade.database import Base


# Browsing categories ("specialties"); independent of Skill.category.
class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    icon_name = Column(Text)
    image_url = Column(Text)
