import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from faleproxy.api.routes import router
from faleproxy.core.config import settings
from faleproxy.errors import MissingURLError, RelayError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Nothing is shared between requests, so there is only logging to do.
    """
    logger.info("Starting Faleproxy (timeout %ss, body cap %d bytes)",
                settings.REQUEST_TIMEOUT, settings.MAX_CONTENT_BYTES)

    yield

    logger.info("Shutting down Faleproxy")

app = FastAPI(
    title="Faleproxy",
    description="Relay that fetches a page and replaces Yale with Fale in its visible text",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Bodies that are not a JSON object carry no usable URL."""
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    return await relay_error_handler(request, MissingURLError())

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Faleproxy",
        "version": "1.0.0",
        "endpoints": {
            "fetch": "POST /fetch",
            "health": "GET /health"
        }
    }

def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
