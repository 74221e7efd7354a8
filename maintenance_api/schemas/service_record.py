"""Maintenance service record Pydantic schemas (request DTOs and response models)."""


from datetime import date

from pydantic import Field, field_validator

from maintenance_api.schemas.common import ApiModel

class ServiceRecordCreate(ApiModel):
    """Body of POST /vehicle/{vid}/{sid}/addmaintenance.

    ``vehicle_id`` / ``service_id`` are accepted but ignored: the ids in the
    URL always win.
    """

    service_id: int | None = None
    vehicle_id: int | None = None
    service_date: str
    part_code: str
    rate: float = Field(ge=0)
    taxable_amount: float = Field(ge=0)
    final_amount: float = Field(ge=0)

class ServiceRecordOut(ApiModel):
    service_id: int
    vehicle_id: int
    service_date: str
    part_code: str
    rate: float
    taxable_amount: float
    final_amount: float

    @field_validator("service_date", mode="before")
    @classmethod
    def _date_as_text(cls, v):
        # DATE columns come back as datetime.date from PostgreSQL
        if isinstance(v, date):
            return v.isoformat()
        return v

class ServiceRecordCreated(ApiModel):
    message: str = "Record inserted successfully"
    record: ServiceRecordOut
