"""Service record repository — queries and inserts against ``detailed_service_record``."""


from maintenance_api.repositories.base import BaseRepository
from maintenance_api.schemas.service_record import ServiceRecordOut

# Storage columns are aliased to the API field names
_SELECT_RECORDS = """
    SELECT serviceid AS service_id,
           vehicleid AS vehicle_id,
           service_date,
           partcode AS part_code,
           rate,
           taxable_amount,
           final_amount
    FROM detailed_service_record
"""

_INSERT_RECORD = """
    INSERT INTO detailed_service_record
        (serviceid, vehicleid, service_date, partcode, rate, taxable_amount, final_amount)
    VALUES
        (:service_id, :vehicle_id, :service_date, :part_code, :rate, :taxable_amount, :final_amount)
"""


class ServiceRecordRepository(BaseRepository[ServiceRecordOut]):
    schema = ServiceRecordOut

    async def list_for_vehicle(self, vehicle_id: int) -> list[ServiceRecordOut]:
        return await self._fetch_all(
            f"{_SELECT_RECORDS} WHERE vehicleid = :vehicle_id",
            vehicle_id=vehicle_id,
        )

    async def list_for_vehicle_and_service(self, vehicle_id: int, service_id: int) -> list[ServiceRecordOut]:
        return await self._fetch_all(
            f"{_SELECT_RECORDS} WHERE vehicleid = :vehicle_id AND serviceid = :service_id",
            vehicle_id=vehicle_id,
            service_id=service_id,
        )

    async def insert(self, record: ServiceRecordOut) -> None:
        await self._execute(_INSERT_RECORD, **record.model_dump())
