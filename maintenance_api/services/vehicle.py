"""Vehicle service — listing and single lookups.

Rule: No SQL / no FastAPI here. Pure Python business logic.
"""


import logging

from maintenance_api.core.exceptions import DatabaseError, NotFoundError
from maintenance_api.db.base import Database
from maintenance_api.repositories.vehicle import VehicleRepository
from maintenance_api.schemas.common import INT64_MAX, INT64_MIN
from maintenance_api.schemas.vehicle import VehicleOut

logger = logging.getLogger(__name__)

class VehicleService:
    def __init__(self, db: Database):
        self._repo = VehicleRepository(db)

    async def list_vehicles(self) -> list[VehicleOut]:
        return await self._repo.list_all()

    async def get_vehicle(self, vehicle_id: str) -> VehicleOut:
        """Look up one vehicle.

        Anything short of a matching row is a 404, including an id that
        isn't a 64-bit integer and a failed lookup.
        """
        try:
            vid = int(vehicle_id)
        except ValueError:
            raise NotFoundError("Vehicle", vehicle_id)
        if not INT64_MIN <= vid <= INT64_MAX:
            raise NotFoundError("Vehicle", vehicle_id)

        try:
            vehicle = await self._repo.get_by_id(vid)
        except DatabaseError:
            logger.warning("Lookup of vehicle %s failed, reporting not found", vid)
            raise NotFoundError("Vehicle", vid)

        if vehicle is None:
            raise NotFoundError("Vehicle", vid)
        return vehicle
