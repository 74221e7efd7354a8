"""Vehicle Pydantic schemas (response models only; vehicles are read-only here)."""


from maintenance_api.schemas.common import ApiModel

class VehicleOut(ApiModel):
    id: int
    make: str
    model: str
    year: int
    mileage: int
