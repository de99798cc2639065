import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vehicle_api.models.vehicle import Vehicle

logger = logging.getLogger(__name__)


SEED_VEHICLES = [
    {"type": "bus", "model_code": "XC90", "brand_name": "Volvo", "launch_date": date(2015, 1, 7)},
    {"type": "car", "model_code": "A4", "brand_name": "Audi", "launch_date": date(2016, 6, 15)},
    {"type": "car", "model_code": "Civic", "brand_name": "Honda", "launch_date": date(2017, 3, 21)},
    {"type": "truck", "model_code": "Actros", "brand_name": "Mercedes-Benz", "launch_date": date(2019, 9, 2)},
]


async def seed_data(session: AsyncSession) -> None:
    result = await session.execute(select(Vehicle).limit(1))
    if result.scalars().first() is not None:
        return

    for v in SEED_VEHICLES:
        session.add(Vehicle(**v))

    await session.commit()
    logger.info("Seeded %d demo vehicles", len(SEED_VEHICLES))
