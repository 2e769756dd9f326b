"""IpData domain model — maps to the 'ip_data' table."""

from sqlalchemy import Column, Integer, BigInteger, String, Boolean, Float, DateTime
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class IpData(Base):
    __tablename__ = "ip_data"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Owner: matches users.pid, checked on write (no FK)
    pid = Column(String(50), nullable=False, index=True)
    record_type = Column(String(20), nullable=False, default="Search", index=True)
    ip = Column(String(45), unique=True, nullable=False, index=True)

    # Geolocation attributes
    network = Column(String(64), nullable=True)
    version = Column(String(10), nullable=True)
    city = Column(String(200), nullable=True, index=True)
    region = Column(String(200), nullable=True)
    region_code = Column(String(20), nullable=True)
    country = Column(String(10), nullable=True)
    country_name = Column(String(200), nullable=True, index=True)
    country_code = Column(String(10), nullable=True)
    country_code_iso3 = Column(String(10), nullable=True)
    country_capital = Column(String(200), nullable=True)
    country_tld = Column(String(20), nullable=True)
    continent_code = Column(String(10), nullable=True)
    in_eu = Column(Boolean, nullable=True)
    postal = Column(String(20), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    timezone = Column(String(100), nullable=True)
    utc_offset = Column(String(10), nullable=True)
    country_calling_code = Column(String(20), nullable=True)
    currency = Column(String(10), nullable=True)
    currency_name = Column(String(100), nullable=True)
    languages = Column(String(255), nullable=True)
    country_area = Column(Float, nullable=True)
    country_population = Column(BigInteger, nullable=True)
    asn = Column(String(50), nullable=True)
    org = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<IpData {self.ip} ({self.pid})>"
