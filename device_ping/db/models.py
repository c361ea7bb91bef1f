"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from device_ping.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Device(Base):
    __tablename__ = "devices"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    tenant_id = Column(String(36), nullable=False, index=True)
    customer_id = Column(String(36), index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(255), default="default")
    label = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    attributes = relationship("AttributeKv", back_populates="device", cascade="all, delete-orphan")


class AttributeKv(Base):
    """Typed key/value attribute of an entity, stored per scope.

    Exactly one of the ``*_v`` columns is populated, matching ``data_type``.
    """

    __tablename__ = "attribute_kv"

    entity_id = Column(String(36), ForeignKey("devices.id"), primary_key=True)
    attribute_scope = Column(String(32), primary_key=True)
    attribute_key = Column(String(255), primary_key=True)
    data_type = Column(String(16), nullable=False)
    bool_v = Column(Boolean)
    long_v = Column(BigInteger)
    dbl_v = Column(Float)
    str_v = Column(Text)
    json_v = Column(Text)
    last_update_ts = Column(BigInteger, nullable=False)

    device = relationship("Device", back_populates="attributes")
