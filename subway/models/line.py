"""Line model for subway lines."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from subway.models.base import Base, TimestampMixin


class Line(Base, TimestampMixin):
    """Line model. Its route is the chain of sections that belong to it."""

    __tablename__ = "lines"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    color: Mapped[str] = mapped_column(String(50), nullable=False)

    # Relationships
    sections: Mapped[list["SectionRow"]] = relationship(
        "SectionRow", back_populates="line", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Line(id={self.id!r}, name={self.name!r}, color={self.color!r})>"
