from vehicle_api.repositories.vehicle_repo import SqlAlchemyVehicleRepository, VehicleRepository

__all__ = ["VehicleRepository", "SqlAlchemyVehicleRepository"]
