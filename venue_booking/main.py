from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from venue_booking.api.routes import bookings, pricing, resources
from venue_booking.core.errors import BookingError

# ⭐ Import logging system
from venue_booking.core.logging_config import get_logger

logger = get_logger()

app = FastAPI(
    title="Venue Booking API",
    version="1.0.0",
    description="Booking admission, conflict detection and pricing for venues"
)


# ⭐ Request Logging Middleware
@app.middleware("http")
async def log_requests(request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url}")

    try:
        response = await call_next(request)
        logger.info(f"RESPONSE: {response.status_code} {request.url}")
        return response

    except Exception as e:
        logger.error(f"ERROR: {request.url} -> {str(e)}")
        raise e


# ⭐ Error bodies: {"message": ..., **extra}
@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    if exc.status_code >= 500:
        logger.error(f"{request.url} -> {exc.message}")
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"UNHANDLED: {request.url} -> {exc}")
    return JSONResponse({"message": "Internal server error"}, status_code=500)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse({"message": "Invalid request body"}, status_code=400)


# ⭐ CORS (booking widget is embedded on venue sites)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(bookings.router)
app.include_router(resources.router)
app.include_router(pricing.router)


@app.get("/", tags=["Root"])
def root():
    return {"message": "Backend running successfully"}
