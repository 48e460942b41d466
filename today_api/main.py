"""FastAPI main application."""
import logging
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from today_api.config import settings
from today_api.exceptions import TimezoneResolutionError
from today_api.models.today import HealthResponse, ServiceInfo, TodayResponse
from today_api.services.date_info import DateInfoService
from today_api.services.date_resolver import DateResolver
from today_api.sources.in_memory import InMemoryEventDataSource
from today_api.utils.dates import utc_now


def _configure_logging() -> None:
    if logging.root.handlers:
        return
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")


_configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description=f"An API that tells you what's special about today's date ({settings.timezone_id})",
    version=settings.app_version,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Resolve the timezone once at startup; an unknown zone stops the app here
try:
    date_resolver = DateResolver(settings.timezone_id)
except TimezoneResolutionError:
    logger.critical(f"Cannot start: timezone '{settings.timezone_id}' is not available on this host")
    raise

logger.info(f"Using timezone {settings.timezone_id}")

date_info_service = DateInfoService(InMemoryEventDataSource(), date_resolver)


def get_date_info_service() -> DateInfoService:
    """Dependency providing the shared date info service."""
    return date_info_service


@app.get("/", response_model=ServiceInfo)
async def root():
    """Root endpoint."""
    return ServiceInfo(message=settings.app_name, version=settings.app_version)


@app.get(
    "/today",
    response_model=TodayResponse,
    name="GetToday",
    description=f"Gets information about what's special about today's date in {settings.timezone_id}",
)
async def get_today(service: DateInfoService = Depends(get_date_info_service)):
    """What is special about today's date."""
    return service.get_today_info()


@app.get("/health", response_model=HealthResponse, include_in_schema=False)
async def health():
    """Health check endpoint for deployments."""
    return HealthResponse(status="Healthy", timestamp=utc_now())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
