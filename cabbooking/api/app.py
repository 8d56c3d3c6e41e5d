"""
FastAPI application factory.

* Registers routes for clients, locations, bookings and payments.
* Maps the domain error taxonomy onto HTTP: caller mistakes become 4xx,
  collaborator failures become 5xx.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from cabbooking.api.middleware import limiter
from cabbooking.api.routes import bookings, clients, health, locations, payments
from cabbooking.config import settings
from cabbooking.domain.entities import InvalidStateTransition
from cabbooking.domain.errors import (
    BookingCompletionError,
    ClientNotFoundError,
    CollaboratorError,
    InvalidInputError,
    LocationNotFoundError,
    ProcessError,
)

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def _error(status_code: int, exc: Exception, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc), **extra})


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return _error(404, exc)


async def _invalid_input(request: Request, exc: Exception) -> JSONResponse:
    return _error(400, exc)


async def _conflict(request: Request, exc: Exception) -> JSONResponse:
    return _error(409, exc)


async def _process_failure(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
    return _error(500, exc)


async def _completion_failure(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Booking completion failed after payment: %s", exc)
    return _error(500, exc, payment_accepted=True)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Cab Booking API",
        description=(
            "Books cabs between two coordinates, prices trips by "
            "great-circle distance and confirms payment against the "
            "client's card on file before completing the booking."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Domain errors; the most specific registered class wins
    app.add_exception_handler(ClientNotFoundError, _not_found)
    app.add_exception_handler(LocationNotFoundError, _not_found)
    app.add_exception_handler(InvalidInputError, _invalid_input)
    app.add_exception_handler(CollaboratorError, _invalid_input)
    app.add_exception_handler(InvalidStateTransition, _conflict)
    app.add_exception_handler(BookingCompletionError, _completion_failure)
    app.add_exception_handler(ProcessError, _process_failure)

    # Routers
    app.include_router(health.router, prefix="/api/v1")
    app.include_router(clients.router, prefix="/api/v1")
    app.include_router(locations.router, prefix="/api/v1")
    app.include_router(bookings.router, prefix="/api/v1")
    app.include_router(payments.router, prefix="/api/v1")

    return app
