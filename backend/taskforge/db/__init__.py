"""Database — SQLAlchemy declarative base shared by every ORM model."""
