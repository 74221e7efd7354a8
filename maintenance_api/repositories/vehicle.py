"""Vehicle repository — read-only queries against ``owned_vehicles``."""


from maintenance_api.repositories.base import BaseRepository
from maintenance_api.schemas.vehicle import VehicleOut

_SELECT_VEHICLES = "SELECT id, make, model, year, mileage FROM owned_vehicles"


class VehicleRepository(BaseRepository[VehicleOut]):
    schema = VehicleOut

    async def list_all(self) -> list[VehicleOut]:
        return await self._fetch_all(_SELECT_VEHICLES)

    async def get_by_id(self, vehicle_id: int) -> VehicleOut | None:
        return await self._fetch_one(f"{_SELECT_VEHICLES} WHERE id = :vehicle_id", vehicle_id=vehicle_id)
