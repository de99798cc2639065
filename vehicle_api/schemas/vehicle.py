from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class VehicleCreate(BaseModel):
    type: str
    model_code: str
    brand_name: str
    launch_date: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VehicleResponse(BaseModel):
    id: int
    type: str
    model_code: str
    brand_name: str
    launch_date: date

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
