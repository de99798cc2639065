"""
Data access for the ``vehicle`` table.

``VehicleRepository`` is the storage contract the service layer depends on;
``SqlAlchemyVehicleRepository`` fulfils it on top of an ``AsyncSession``.
Repositories never commit: the caller owns the transaction.
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vehicle_api.models.vehicle import Vehicle

logger = logging.getLogger(__name__)


class VehicleRepository(ABC):
    """Keyed storage of Vehicle records."""

    @abstractmethod
    async def save(self, vehicle: Vehicle) -> Vehicle:
        """Persist ``vehicle``, assigning an id when it has none."""

    @abstractmethod
    async def find_by_id(self, vehicle_id: int) -> Vehicle | None:
        """Return the matching record, or ``None`` when no record has that id."""

    @abstractmethod
    async def find_all(self, limit: int | None = None) -> list[Vehicle]:
        """Return records in insertion order, at most ``limit`` of them."""

    @abstractmethod
    async def count(self) -> int:
        ...


class SqlAlchemyVehicleRepository(VehicleRepository):

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, vehicle: Vehicle) -> Vehicle:
        self.session.add(vehicle)
        # Flush so the database assigns the id before the caller commits.
        await self.session.flush()
        logger.debug("Stored vehicle #%s", vehicle.id)
        return vehicle

    async def find_by_id(self, vehicle_id: int) -> Vehicle | None:
        return await self.session.get(Vehicle, vehicle_id)

    async def find_all(self, limit: int | None = None) -> list[Vehicle]:
        stmt = select(Vehicle).order_by(Vehicle.id)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Vehicle))
        return result.scalar_one()
