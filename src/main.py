"""
Main FastAPI application entry point.
Configures and initializes the Drug Catalogue web application.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse
from mangum import Mangum
from src.core.config import settings
from src.core.exception_handler import register_exception_handlers
from src.core.logger import setup_logger
from src.api.routes import health_routes, drug_routes

setup_logger(level=settings.log_level, log_format=settings.log_format)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Drug catalogue for a veterinary clinic"
)

# Register exception handlers
register_exception_handlers(app)

# Register routes
app.include_router(health_routes.router)
app.include_router(drug_routes.router)


@app.get("/", include_in_schema=False)
async def welcome():
    return RedirectResponse("/drugs", status_code=status.HTTP_303_SEE_OTHER)


# Middleware to log request paths
@app.middleware("http")
async def log_request(request: Request, call_next):
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response

# Lambda handler for AWS
handler = Mangum(app, lifespan="off")


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
