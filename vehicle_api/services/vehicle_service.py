import logging
import re
from datetime import date
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from vehicle_api.config import DateParsingConfig, settings
from vehicle_api.database import async_session, transaction
from vehicle_api.models.vehicle import Vehicle
from vehicle_api.repositories import SqlAlchemyVehicleRepository, VehicleRepository
from vehicle_api.utils.exceptions import InvalidInput

logger = logging.getLogger(__name__)

RepositoryFactory = Callable[[AsyncSession], VehicleRepository]


def parse_launch_date(text: str, config: DateParsingConfig) -> date:
    """Parse an ISO-8601 calendar date (``YYYY-MM-DD``).

    Raises ``InvalidInput`` when the text does not match ``config.pattern`` or
    names a day that does not exist.
    """
    if not re.fullmatch(config.pattern, text):
        raise InvalidInput(f"Invalid launch date '{text}': expected YYYY-MM-DD", field="launchDate")
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise InvalidInput(f"Invalid launch date '{text}': {exc}", field="launchDate") from exc


class VehicleService:
    """Transactional operations on vehicles.

    Every public method runs in its own transaction: creation in a read-write
    one, lookups in a read-only one.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker = async_session,
        repository_factory: RepositoryFactory = SqlAlchemyVehicleRepository,
        date_config: DateParsingConfig | None = None,
    ):
        self.session_factory = session_factory
        self.repository_factory = repository_factory
        self.date_config = date_config or DateParsingConfig.from_settings(settings)

    async def create_vehicle(self, type: str, model_code: str, brand_name: str, launch_date: str) -> Vehicle:
        parsed = parse_launch_date(launch_date, self.date_config)
        async with transaction(self.session_factory) as session:
            vehicle = Vehicle(
                type=type,
                model_code=model_code,
                brand_name=brand_name,
                launch_date=parsed,
            )
            saved = await self.repository_factory(session).save(vehicle)
        logger.info("Created vehicle #%s (%s %s)", saved.id, saved.brand_name, saved.model_code)
        return saved

    async def get_all_vehicles(self, count: int) -> list[Vehicle]:
        if count < 0:
            raise InvalidInput(f"count must be non-negative, got {count}", field="count")
        async with transaction(self.session_factory, read_only=True) as session:
            vehicles = await self.repository_factory(session).find_all(limit=count)
        logger.debug("Fetched %d vehicle(s) for count=%d", len(vehicles), count)
        return vehicles

    async def get_vehicle(self, vehicle_id: int) -> Vehicle | None:
        async with transaction(self.session_factory, read_only=True) as session:
            vehicle = await self.repository_factory(session).find_by_id(vehicle_id)
        if vehicle is None:
            logger.debug("Vehicle #%s not found", vehicle_id)
        return vehicle

    async def count_vehicles(self) -> int:
        async with transaction(self.session_factory, read_only=True) as session:
            return await self.repository_factory(session).count()
