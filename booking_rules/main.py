import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from booking_rules.api.routers.bookings import router as bookings_router
from booking_rules.api.routers.health import router as health_router
from booking_rules.api.schemas.bookings import ValidationResponse
from booking_rules.config import get_settings
from booking_rules.domain.errors import (
    BookingNotEligibleError,
    DomainError,
    VehicleNotFoundError,
)

settings = get_settings()

# Configure structured logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Traduce errores de dominio a respuestas JSON con su código de negocio."""
    content = {"detail": exc.message, "code": exc.code}

    if isinstance(exc, VehicleNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, BookingNotEligibleError):
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        content["validation"] = ValidationResponse.from_domain(exc.validation).model_dump()
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    logger.info(f"{exc.code} en {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status_code, content=content)


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    # Log the full error with context for internal debugging
    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    # Return a generic error to the client without exposing internal details
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(bookings_router, prefix="/api/v1", tags=["Bookings"])
