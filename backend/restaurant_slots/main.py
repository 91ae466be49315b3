import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .routers import bookings, restaurants, slots

logging.basicConfig(level=settings.log_level)

app = FastAPI(title="Restaurant Slots API")

app.include_router(bookings.router)
app.include_router(restaurants.router)
app.include_router(slots.router)


VALUE_ERROR_PREFIX = "Value error, "


def _strip_error_prefix(msg: str) -> str:
    # field_validator messages arrive as "Value error, <message>"
    if msg.startswith(VALUE_ERROR_PREFIX):
        return msg[len(VALUE_ERROR_PREFIX):]
    return msg


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            # Drop the "body" / "query" location prefix
            "field": ".".join(str(p) for p in err["loc"][1:]) or str(err["loc"][0]),
            "message": _strip_error_prefix(err["msg"]),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )


@app.get("/health")
def health():
    return {"status": "ok"}
