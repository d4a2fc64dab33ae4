"""
FastAPI entrypoint for the TripSplit backend application.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from tripsplit.core.config import settings
from tripsplit.core.exceptions import (
    ConversionFailed, InvalidAmount, InvalidTripState, RecognitionFailed
)
from tripsplit.core.utils import format_error
from tripsplit.api.router import api_router
from tripsplit.db.session import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(
    title="TripSplit API",
    description="Backend API for shared trip expenses and settlements",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(InvalidTripState)
async def invalid_trip_state_handler(request: Request, exc: InvalidTripState):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=format_error(str(exc)))


@app.exception_handler(InvalidAmount)
async def invalid_amount_handler(request: Request, exc: InvalidAmount):
    return JSONResponse(status_code=422, content=format_error(str(exc)))


@app.exception_handler(RecognitionFailed)
async def recognition_failed_handler(request: Request, exc: RecognitionFailed):
    logger.warning(f"Receipt recognition failed: {exc}")
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=format_error("OCR failed", str(exc)))


@app.exception_handler(ConversionFailed)
async def conversion_failed_handler(request: Request, exc: ConversionFailed):
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=format_error("Conversion failed", str(exc)))


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "TripSplit API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
