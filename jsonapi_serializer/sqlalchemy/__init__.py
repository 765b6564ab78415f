"""SQLAlchemy helpers for JSON:API serialization."""

from .records import to_record, to_records

__all__ = ["to_record", "to_records"]
