"""Persistent row for one section of a line."""

from sqlalchemy import CheckConstraint, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from subway.models.base import Base, TimestampMixin


class SectionRow(Base, TimestampMixin):
    """Stored form of a section: a directed, distance-weighted edge on one line."""

    __tablename__ = "sections"
    __table_args__ = (
        CheckConstraint("distance > 0", name="ck_sections_distance_positive"),
        CheckConstraint("up_station_id <> down_station_id", name="ck_sections_no_self_loop"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    line_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("lines.id", ondelete="CASCADE"), nullable=False, index=True
    )
    up_station_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("stations.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    down_station_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("stations.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    distance: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    line: Mapped["Line"] = relationship("Line", back_populates="sections")

    def __repr__(self) -> str:
        return (
            f"<SectionRow(id={self.id!r}, line_id={self.line_id!r}, "
            f"up={self.up_station_id!r}, down={self.down_station_id!r}, distance={self.distance!r})>"
        )
