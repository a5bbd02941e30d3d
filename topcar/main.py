import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from topcar.core import config
from topcar.core.errors import AppError
from topcar.db.seed import init_db
from topcar.schemas.common import fail
from topcar.api.routes import appointments as appointments_router
from topcar.api.routes import auth as auth_router
from topcar.api.routes import expenses as expenses_router
from topcar.api.routes import payments as payments_router
from topcar.api.routes import sales as sales_router
from topcar.api.routes import services as services_router
from topcar.api.routes import uploads as uploads_router
from topcar.api.routes import workers as workers_router

# ── Configure logging ──
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s :: %(message)s"
)
log = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"

app = FastAPI(title="TopCar Detailing API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup():
    init_db(demo=config.SEED_DEMO_DATA)
    log.info("[DB] Tables created / verified")


# ── Error envelope ──

@app.exception_handler(AppError)
def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=fail(exc.error, exc.message))


@app.exception_handler(StarletteHTTPException)
def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=fail(str(exc.detail)), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    missing = [str(e["loc"][-1]) for e in errors if e.get("type") == "missing"]
    if missing:
        return JSONResponse(status_code=400, content=fail("Missing required fields", ", ".join(missing)))

    details = "; ".join(
        f"{'.'.join(str(p) for p in e['loc'][1:]) or e['loc'][0]}: {e['msg']}" for e in errors
    )
    return JSONResponse(status_code=400, content=fail("Invalid request", details))


@app.exception_handler(SQLAlchemyError)
def database_error_handler(request: Request, exc: SQLAlchemyError):
    log.exception(f"[DB] {request.method} {request.url.path} failed")
    return JSONResponse(status_code=500, content=fail(INTERNAL_ERROR))


@app.exception_handler(Exception)
def unexpected_error_handler(request: Request, exc: Exception):
    log.exception(f"[API] Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=fail(INTERNAL_ERROR))


@app.get("/")
def root():
    return {"success": True, "message": "TopCar Detailing API running"}


app.include_router(auth_router.router)
app.include_router(services_router.router)
app.include_router(appointments_router.router)
app.include_router(expenses_router.router)
app.include_router(payments_router.router)
app.include_router(uploads_router.router)
app.include_router(sales_router.router)
app.include_router(workers_router.router)


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
