"""
Main FastAPI application entry point.

``ENVIRONMENT`` selects the config file (development, production or test).
"""
import logging
import os

import uvicorn

from carbon_tracker.create_app import get_app
from carbon_tracker.utils.constants import ConfigFile

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

app = get_app(f"{ENVIRONMENT}.toml" if ENVIRONMENT else ConfigFile.DEVELOPMENT)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Carbon Tracker API",
        "version": app.version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "carbon-tracker"}


if __name__ == "__main__":
    try:
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=int(os.environ.get("PORT", 8000)),
            log_level="debug" if app.debug else "info",
            loop="asyncio",
        )
    except Exception as e:
        logging.error(f"Error running FastAPI: {e}")
