"""
DeliveryPilot API

Delivery-schedule preview and storefront messaging service.

Environment:
    DP_CONFIG_PATH   Shop configuration file, or a directory of them
    DP_LOG_LEVEL     Log level (default INFO)
    DP_DOCS_ENABLED  Serve /docs and /openapi.json (default true)
    DP_CORS_ORIGINS  Comma-separated allowed origins
"""

import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import deliverypilot
from deliverypilot.calendars import supported_countries
from deliverypilot.config import ConfigLoader
from deliverypilot.exceptions import DeliveryPilotError
from deliverypilot.logging_config import configure_logging, get_logger

from api.routes import holidays, preview, storefront

CONFIG_SUFFIXES = {".yaml", ".yml", ".json"}

logger = get_logger("api")

# Configuration loader
loader = ConfigLoader()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_configurations(config_path: str) -> int:
    """
    Load shop configurations from a file or every config file in a directory.

    Files that fail to load are logged and skipped.

    Returns:
        Number of configurations loaded
    """
    path = Path(config_path)
    if path.is_dir():
        files = sorted(p for p in path.iterdir() if p.suffix.lower() in CONFIG_SUFFIXES)
    else:
        files = [path]

    loaded = 0
    for file in files:
        try:
            config = loader.load(file)
        except DeliveryPilotError as e:
            logger.error("Failed to load %s: %s", file, e, extra={"shop": e.shop})
            continue
        if not config.shop:
            logger.warning("Skipping %s: document has no shop domain", file)
            continue
        loaded += 1
    return loaded


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and load shop configurations on startup."""
    configure_logging()

    config_path = os.getenv("DP_CONFIG_PATH")
    if config_path:
        loaded = load_configurations(config_path)
        logger.info("Loaded %d shop configurations", loaded)
    else:
        logger.info("DP_CONFIG_PATH not set; storefront endpoint has no shops")

    # Share loader with routes
    storefront.set_loader(loader)

    yield

    logger.info("Shutting down")


docs_enabled = _env_flag("DP_DOCS_ENABLED", True)

# Create app
app = FastAPI(
    title="DeliveryPilot API",
    description="""
**Delivery-schedule engine for storefront messaging.**

DeliveryPilot works out when an order placed now ships and arrives, from the
shop's cutoff times, closures, bank holidays and per-rule overrides, and
renders merchant message templates with those dates.

## Quick Start

1. `GET /countries` - See supported bank-holiday countries
2. `POST /preview` - Preview messages for unsaved settings
3. `POST /storefront/message` - Messages for a product page
    """,
    version=deliverypilot.__version__,
    lifespan=lifespan,
    docs_url="/docs" if docs_enabled else None,
    redoc_url="/redoc" if docs_enabled else None,
    openapi_url="/openapi.json" if docs_enabled else None,
)

# CORS
cors_origins = [o.strip() for o in os.getenv("DP_CORS_ORIGINS", "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins or ["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(holidays.router)
app.include_router(preview.router)
app.include_router(storefront.router)


@app.get("/health", tags=["Health"])
async def health():
    """Health check endpoint."""
    return {
        "healthy": True,
        "version": deliverypilot.__version__,
        "shops_loaded": len(loader.list_shops()),
        "countries": len(supported_countries()),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
