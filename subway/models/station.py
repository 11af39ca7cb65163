"""Station model for the global station registry."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from subway.models.base import Base, TimestampMixin


class Station(Base, TimestampMixin):
    """A named station. Sections reference stations by id only."""

    __tablename__ = "stations"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    def __repr__(self) -> str:
        return f"<Station(id={self.id!r}, name={self.name!r})>"
