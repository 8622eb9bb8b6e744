from src.api.database.database import Base
from sqlalchemy import Column, Integer, String, TIMESTAMP, Index, text


class Reading(Base):
    __tablename__ = "readings"
    __table_args__ = (
        Index("idx_reading_date", "date"),
        Index("IDX_reading_office", "reading_office"),
        Index("IDX_cycle_year", "cycle_year"),
    )

    id = Column(Integer, primary_key=True, nullable=False)
    date = Column(TIMESTAMP(timezone=True), nullable=False)
    reading_type = Column(String, nullable=False)
    citation = Column(String, nullable=False)
    translation = Column(String(50), server_default="NRSV")
    reading_office = Column(String(50), server_default="sunday")
    cycle_year = Column(String(50), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=text("now()"))
