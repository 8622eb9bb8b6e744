from src.api.database.database import Base
from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, Boolean, Index, text


class SpecialDay(Base):
    # Feast, fast or commemoration on the liturgical calendar.
    __tablename__ = "special_days"
    __table_args__ = (
        Index("idx_special_day_date", "date"),
        Index("idx_special_day_year", "year"),
    )

    id = Column(Integer, primary_key=True, nullable=False)
    name = Column(String(200), nullable=False)
    date = Column(TIMESTAMP(timezone=True), nullable=False)
    type = Column(String, nullable=False, server_default="other")
    description = Column(Text, nullable=True)
    rank = Column(String(50), nullable=True)
    is_feast_day = Column(Boolean, server_default="FALSE")
    is_moveable = Column(Boolean, server_default="FALSE")
    # Column name is camelCase in the database.
    liturgicalColor = Column(String(10), nullable=True)
    year = Column(Integer, nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=text("now()"))
    updated_at = Column(TIMESTAMP(timezone=True), server_default=text("now()"))
