"""
Base module for SQLAlchemy models.
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy import MetaData, Column, DateTime, Integer, Uuid, func
from sqlalchemy.orm import declarative_base, declared_attr

# Define naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

# Create metadata with naming convention
db_metadata = MetaData(naming_convention=convention)

# Create base model class
Base = declarative_base(metadata=db_metadata)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    # Python-side defaults keep the attributes loaded after flush (no lazy refresh under asyncio)
    @declared_attr
    def created_at(cls):
        return Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False, index=True)

    @declared_attr
    def updated_at(cls):
        return Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False)


class UUIDMixin:
    @declared_attr
    def id(cls):
        return Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)


class VersionedMixin:
    """
    Optimistic concurrency for documents mutated by read-modify-write.

    An UPDATE whose version no longer matches raises StaleDataError on flush.
    """
    @declared_attr
    def version(cls):
        return Column(Integer, nullable=False, default=1)

    @declared_attr
    def __mapper_args__(cls):
        return {"version_id_col": cls.version}
