"""Maintenance service record service — listing and inserting records for a vehicle."""


import logging

from maintenance_api.db.base import Database
from maintenance_api.repositories.service_record import ServiceRecordRepository
from maintenance_api.schemas.service_record import ServiceRecordCreate, ServiceRecordOut

logger = logging.getLogger(__name__)

class ServiceRecordService:
    def __init__(self, db: Database):
        self._repo = ServiceRecordRepository(db)

    async def list_records(self, vehicle_id: int) -> list[ServiceRecordOut]:
        return await self._repo.list_for_vehicle(vehicle_id)

    async def list_records_for_service(self, vehicle_id: int, service_id: int) -> list[ServiceRecordOut]:
        return await self._repo.list_for_vehicle_and_service(vehicle_id, service_id)

    async def add_record(self, vehicle_id: int, service_id: int, data: ServiceRecordCreate) -> ServiceRecordOut:
        """Insert a record under the ids from the URL, ignoring any ids in the body."""
        record = ServiceRecordOut(
            **data.model_dump(exclude={"vehicle_id", "service_id"}),
            vehicle_id=vehicle_id,
            service_id=service_id,
        )
        await self._repo.insert(record)
        logger.info("Inserted service record %s for vehicle %s", service_id, vehicle_id)
        return record
