# hrms/main.py
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from hrms.config import settings
from hrms.core.exceptions import DomainError
from hrms.database import engine, Base
from hrms.models.employee import Employee  # noqa: F401  registers tables
from hrms.routers import employees

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("hrms")

app = FastAPI(title="HRMS - Performance & Increment API", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc)
    else:
        logger.warning("%s %s rejected (%d): %r", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.public_message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("%s %s failed", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Server error"})


app.include_router(employees.router)


# Create DB Tables (for demo only — use Alembic in prod)
@app.on_event("startup")
async def startup_event():
    if not settings.AUTO_CREATE_TABLES:
        return
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


@app.get("/")
def read_root():
    return {"message": "Welcome to HRMS Backend"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("hrms.main:app", host="0.0.0.0", port=8000, reload=True)
