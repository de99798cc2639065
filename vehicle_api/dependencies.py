from functools import lru_cache

from vehicle_api.services.vehicle_service import VehicleService


@lru_cache
def get_vehicle_service() -> VehicleService:
    return VehicleService()
