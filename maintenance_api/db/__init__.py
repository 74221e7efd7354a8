"""Database package — shared async engine handle, connection provider, FastAPI dependency."""
from maintenance_api.db.base import ConnectionResult, Database, acquire, get_database

__all__ = ["ConnectionResult", "Database", "acquire", "get_database"]
