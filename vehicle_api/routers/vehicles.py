from fastapi import APIRouter, Depends, Query

from vehicle_api.dependencies import get_vehicle_service
from vehicle_api.schemas.vehicle import VehicleCreate, VehicleResponse
from vehicle_api.services.vehicle_service import VehicleService
from vehicle_api.utils.response import success_response

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


def _dump(vehicle) -> dict:
    return VehicleResponse.model_validate(vehicle).model_dump(mode="json", by_alias=True)


@router.get("")
async def get_vehicles(
    count: int = Query(default=10),
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicles = await service.get_all_vehicles(count)
    return success_response(data=[_dump(v) for v in vehicles])


@router.get("/{vehicle_id}")
async def get_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    vehicle = await service.get_vehicle(vehicle_id)
    return success_response(data=_dump(vehicle) if vehicle is not None else None)


@router.post("", status_code=201)
async def create_vehicle(payload: VehicleCreate, service: VehicleService = Depends(get_vehicle_service)):
    vehicle = await service.create_vehicle(
        type=payload.type,
        model_code=payload.model_code,
        brand_name=payload.brand_name,
        launch_date=payload.launch_date,
    )
    return success_response(data=_dump(vehicle))
