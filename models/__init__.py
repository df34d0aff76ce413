"""
Persistence layer: SQLAlchemy models and the DBStorage helper.
Storage is constructed by the application factory, not at import time.
"""
from models.db_storage import DBStorage

__all__ = ["DBStorage"]
