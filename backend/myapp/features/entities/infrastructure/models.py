"""SQLAlchemy models for the entities feature."""

from sqlalchemy import BigInteger, Column, ForeignKey, Integer

from myapp.core.database import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns
IdType = BigInteger().with_variant(Integer(), "sqlite")


class AModel(Base):
    """A table."""
    __tablename__ = "a"

    id = Column(IdType, primary_key=True, autoincrement=True)

    def __repr__(self):
        return f"<A(id={self.id})>"


class BModel(Base):
    """B table."""
    __tablename__ = "b"

    id = Column(IdType, primary_key=True, autoincrement=True)
    a_id = Column(IdType, ForeignKey("a.id", ondelete="SET NULL"), nullable=True, index=True)

    def __repr__(self):
        return f"<B(id={self.id}, a_id={self.a_id})>"


class CModel(Base):
    """C table."""
    __tablename__ = "c"

    id = Column(IdType, primary_key=True, autoincrement=True)

    def __repr__(self):
        return f"<C(id={self.id})>"


class DModel(Base):
    """D table."""
    __tablename__ = "d"

    id = Column(IdType, primary_key=True, autoincrement=True)

    def __repr__(self):
        return f"<D(id={self.id})>"
