"""Services package — all business logic lives here, never in routers.

Files:
  vehicle.py         — vehicle listing and lookup
  service_record.py  — maintenance record listing and insert

Rule: routers call services, services call repositories, repositories call the DB.
      No SQL in routers. No FastAPI imports in services.
"""
