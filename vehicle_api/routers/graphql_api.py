"""
GraphQL surface of the service.

Resolvers are thin forwards to ``VehicleService``; the service instance is
taken from the request context so FastAPI dependency overrides apply here too.
"""

import datetime

import strawberry
from fastapi import Depends
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from vehicle_api.dependencies import get_vehicle_service
from vehicle_api.models.vehicle import Vehicle as VehicleModel
from vehicle_api.services.vehicle_service import VehicleService
from vehicle_api.utils.exceptions import InvalidInput


@strawberry.type(name="Vehicle")
class VehicleType:
    id: int
    type: str
    model_code: str
    brand_name: str
    launch_date: datetime.date

    @classmethod
    def from_model(cls, vehicle: VehicleModel) -> "VehicleType":
        return cls(
            id=vehicle.id,
            type=vehicle.type,
            model_code=vehicle.model_code,
            brand_name=vehicle.brand_name,
            launch_date=vehicle.launch_date,
        )


def _service(info: Info) -> VehicleService:
    return info.context["vehicle_service"]


@strawberry.type
class Query:
    @strawberry.field
    async def vehicles(self, info: Info, count: int) -> list[VehicleType]:
        vehicles = await _service(info).get_all_vehicles(count)
        return [VehicleType.from_model(v) for v in vehicles]

    @strawberry.field
    async def vehicle(self, info: Info, id: int) -> VehicleType | None:
        vehicle = await _service(info).get_vehicle(id)
        return VehicleType.from_model(vehicle) if vehicle is not None else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_vehicle(
        self,
        info: Info,
        type: str,
        model_code: str,
        brand_name: str,
        launch_date: str,
    ) -> VehicleType:
        vehicle = await _service(info).create_vehicle(type, model_code, brand_name, launch_date)
        return VehicleType.from_model(vehicle)


def _should_mask_error(error: GraphQLError) -> bool:
    # Only errors raised from resolvers are candidates; parse and validation
    # errors have no original_error and are reported as-is.
    original = error.original_error
    return original is not None and not isinstance(original, InvalidInput)


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[lambda: MaskErrors(should_mask_error=_should_mask_error)],
)


async def get_context(service: VehicleService = Depends(get_vehicle_service)) -> dict:
    return {"vehicle_service": service}


graphql_router = GraphQLRouter(schema, context_getter=get_context)
