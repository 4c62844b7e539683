"""SQLAlchemy models for ridelog database."""

from datetime import datetime
from sqlalchemy import (
    Column,
    String,
    DateTime,
    Float,
    Integer,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

# UUIDs are stored in canonical 36-character text form.
UUID_LENGTH = 36


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(String(UUID_LENGTH), primary_key=True)
    date = Column(DateTime, nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    category = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    is_tax_deductible = Column(Boolean, default=False, nullable=False)
    tax_deductible_percentage = Column(Integer, default=100, nullable=False)
    creation_method = Column(String, default="manual", nullable=False)
    is_uploaded = Column(Boolean, default=False, nullable=False)
    last_modified = Column(DateTime, default=datetime.now, nullable=False)
    # Comma-separated receipt UUIDs
    receipt_ids = Column(String, nullable=True)
    related_mileage_id = Column(String(UUID_LENGTH), nullable=True)


class Income(Base):
    """Income model."""

    __tablename__ = "income"

    id = Column(String(UUID_LENGTH), primary_key=True)
    date = Column(DateTime, nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    tip_amount = Column(Numeric(10, 2), default=0, nullable=False)
    source = Column(String, nullable=False, index=True)
    notes = Column(String, nullable=True)
    is_uploaded = Column(Boolean, default=False, nullable=False)
    last_modified = Column(DateTime, default=datetime.now, nullable=False)


class Mileage(Base):
    """Mileage model."""

    __tablename__ = "mileage"

    id = Column(String(UUID_LENGTH), primary_key=True)
    date = Column(DateTime, nullable=False, index=True)
    start_mileage = Column(Float, nullable=True)
    end_mileage = Column(Float, nullable=True)
    distance = Column(Float, nullable=False)
    purpose = Column(String, nullable=True)
    is_tax_deductible = Column(Boolean, default=True, nullable=False)
    tax_deductible_percentage = Column(Integer, default=100, nullable=False)
    related_fuel_expense_id = Column(String(UUID_LENGTH), nullable=True, index=True)
    is_uploaded = Column(Boolean, default=False, nullable=False)
    last_modified = Column(DateTime, default=datetime.now, nullable=False)


class WorkHours(Base):
    """Work hours model."""

    __tablename__ = "work_hours"

    id = Column(String(UUID_LENGTH), primary_key=True)
    date = Column(DateTime, nullable=False, index=True)
    start_time = Column(DateTime, nullable=True)
    end_time = Column(DateTime, nullable=True)
    total_hours = Column(Float, nullable=False)
    notes = Column(String, nullable=True)
    is_uploaded = Column(Boolean, default=False, nullable=False)
    last_modified = Column(DateTime, default=datetime.now, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
