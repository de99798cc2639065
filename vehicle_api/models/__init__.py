from vehicle_api.models.vehicle import Vehicle

__all__ = ["Vehicle"]
