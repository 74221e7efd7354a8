"""Vehicle and maintenance record routes.

Pattern:
  1. Resolve the shared Database via Depends (500 if startup never set it)
  2. Let FastAPI coerce path ids to 64-bit integers (failures become 400)
  3. Decode the body, if any, only after the Database resolved
  4. Instantiate the service with the Database and return its result
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from pydantic import ValidationError

from maintenance_api.core.exceptions import BadRequestError
from maintenance_api.db.base import Database, get_database
from maintenance_api.schemas.common import INT64_MAX, INT64_MIN
from maintenance_api.schemas.service_record import (
    ServiceRecordCreate,
    ServiceRecordCreated,
    ServiceRecordOut,
)
from maintenance_api.schemas.vehicle import VehicleOut
from maintenance_api.services.service_record import ServiceRecordService
from maintenance_api.services.vehicle import VehicleService

router = APIRouter(tags=["Vehicles"])

IdPath = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


# ------------------------------------------------------------------
# Helper — body decoding after the database check
# ------------------------------------------------------------------

async def _record_body(request: Request) -> ServiceRecordCreate:
    try:
        payload = await request.json()
        return ServiceRecordCreate.model_validate(payload)
    except (ValueError, ValidationError):
        raise BadRequestError("Invalid request payload")


# ------------------------------------------------------------------
# Vehicles
# ------------------------------------------------------------------

@router.get("/vehicles", response_model=list[VehicleOut])
async def list_vehicles(db: Database = Depends(get_database)):
    """List every owned vehicle. Returns ``[]`` when there are none."""
    return await VehicleService(db).list_vehicles()


@router.get("/vehicle/{vehicle_id}", response_model=VehicleOut)
async def get_vehicle(vehicle_id: str, db: Database = Depends(get_database)):
    # Taken as text: a malformed id is reported as not found, not as 400
    return await VehicleService(db).get_vehicle(vehicle_id)


# ------------------------------------------------------------------
# Maintenance records
# ------------------------------------------------------------------

@router.get("/vehicle/{vehicle_id}/viewmaintenance", response_model=list[ServiceRecordOut])
async def view_maintenance(vehicle_id: IdPath, db: Database = Depends(get_database)):
    """All maintenance records for one vehicle."""
    return await ServiceRecordService(db).list_records(vehicle_id)


@router.get(
    "/vehicle/{vehicle_id}/{service_id}/viewmaintenancebyvidsid",
    response_model=list[ServiceRecordOut],
)
async def view_maintenance_by_service(
    vehicle_id: IdPath,
    service_id: IdPath,
    db: Database = Depends(get_database),
):
    """Maintenance records for one vehicle narrowed to a single service id."""
    return await ServiceRecordService(db).list_records_for_service(vehicle_id, service_id)


@router.post(
    "/vehicle/{vehicle_id}/{service_id}/addmaintenance",
    response_model=ServiceRecordCreated,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ServiceRecordCreate.model_json_schema()}},
        },
    },
)
async def add_maintenance(
    vehicle_id: IdPath,
    service_id: IdPath,
    request: Request,
    db: Database = Depends(get_database),
):
    """Insert a maintenance record. Ids in the URL override ids in the body."""
    body = await _record_body(request)
    record = await ServiceRecordService(db).add_record(vehicle_id, service_id, body)
    return ServiceRecordCreated(record=record)
