import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from vehicle_api.config import settings
from vehicle_api.database import create_tables, async_session
from vehicle_api.dependencies import get_vehicle_service
from vehicle_api.logging_config import setup_logging
from vehicle_api.routers.graphql_api import graphql_router
from vehicle_api.routers.vehicles import router as vehicles_router
from vehicle_api.seed import seed_data
from vehicle_api.services.vehicle_service import VehicleService
from vehicle_api.utils.exceptions import register_exception_handlers
from vehicle_api.utils.response import success_response

SERVICE_NAME = "vehicle-query-api"
VERSION = "0.1.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    await create_tables()
    if settings.seed_demo_data:
        async with async_session() as session:
            await seed_data(session)
    logger.info("%s %s ready", SERVICE_NAME, VERSION)
    yield


app = FastAPI(
    title="Vehicle Query API",
    description="GraphQL and REST access to the vehicle catalogue",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(vehicles_router, prefix="/api/v1")
app.include_router(graphql_router, prefix="/graphql")


@app.get("/health")
async def health_check(service: VehicleService = Depends(get_vehicle_service)):
    return success_response(
        data={"service": SERVICE_NAME, "version": VERSION, "vehicles": await service.count_vehicles()}
    )
