"""SQLAlchemy model for application users."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, Integer, String

from roomchat.core.db import Base

# SQLite only auto-assigns ids on an INTEGER primary key
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


class User(Base):
    __tablename__ = "user"

    id = Column(ID_TYPE, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)
