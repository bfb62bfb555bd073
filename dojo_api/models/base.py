from sqlalchemy.orm import as_declarative, declared_attr
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import DateTime, Integer, func


@as_declarative()
class Base:
    __abstract__ = True  # Prevents creating a table for the base class

    id: Mapped[int]

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()

    id = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at = mapped_column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Optimistic concurrency counter, bumped by every update
    version = mapped_column(Integer, nullable=False, default=1, server_default="1")
