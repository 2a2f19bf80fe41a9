"""SQLAlchemy models for myapp2."""

from sqlalchemy import Column

from myapp.features.entities.infrastructure.models import IdType
from myapp2.core.database import Base


class CModel(Base):
    """C table of myapp2."""
    __tablename__ = "c"

    id = Column(IdType, primary_key=True, autoincrement=True)

    def __repr__(self):
        return f"<myApp2C(id={self.id})>"
