"""
OSS Insights API -- Application entry point.

Run with:
    uvicorn oss_api.main:app --reload

Then open http://localhost:8000/docs for the interactive Swagger UI.

This file:
  1. Configures logging from OSS_LOG_LEVEL
  2. Creates the FastAPI application
  3. Adds CORS middleware (the admin and investor portals live on other origins)
  4. Mounts all route modules
  5. Defines the health check endpoint
"""

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from oss_api import config
from oss_api.models.domain import FixtureStore
from oss_api.models.schemas import HealthResponse
from oss_api.routes import admin, blockchain, bundles, documents, intelligence, sla, talent
from oss_api.store import get_store

VERSION = "0.3.0"

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Create the FastAPI application
#
# The metadata here powers the auto-generated Swagger docs at /docs.
# ---------------------------------------------------------------------------

app = FastAPI(
    title="BIDA One-Stop-Service Insights API",
    version=VERSION,
    description=(
        "Derived metrics for the Bangladesh Investment Development Authority "
        "One-Stop-Service portals. Every number is computed from one shared "
        "case universe, so the admin, investor and public views agree.\n\n"
        "---\n\n"
        "## Endpoint groups\n\n"
        "| Prefix | Purpose |\n"
        "|--------|--------|\n"
        "| `/v1/admin` | Command center, governance, agencies, officers, EODB |\n"
        "| `/v1/intelligence` | Bottleneck analysis and the national FDI pulse |\n"
        "| `/v1/sla` | Public SLA transparency |\n"
        "| `/v1/bundles`, `/v1/bundle-purchases` | Starter bundles and their lifecycle |\n"
        "| `/v1/talent` | District workforce and expatriate talent pool |\n"
        "| `/v1/documents` | Virtual deal room |\n"
        "| `/v1/blockchain` | License verification |\n\n"
        "---\n\n"
        "**Data:** in-memory fixtures, rebuilt on every restart."
    ),
)

# ---------------------------------------------------------------------------
# CORS Middleware
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Mount route modules
# ---------------------------------------------------------------------------

app.include_router(admin.router)
app.include_router(intelligence.router)
app.include_router(sla.router)
app.include_router(bundles.router)
app.include_router(talent.router)
app.include_router(documents.router)
app.include_router(blockchain.router)


@app.get("/", include_in_schema=False)
async def root():
    """Redirect root to the API docs."""
    return RedirectResponse(url="/docs")


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@app.get(
    "/v1/health",
    summary="Health check",
    description="Returns the current status of the API. Use this for uptime monitoring.",
    tags=["System"],
)
async def health(store: FixtureStore = Depends(get_store)) -> HealthResponse:
    """Simple health check for load balancers and monitoring."""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        reference_date=store.reference_date,
        applications=len(store.applications),
        purchases=len(store.purchases),
        documents=len(store.documents),
    )


logger.info("OSS Insights API %s loaded (reference date %s)", VERSION, config.REFERENCE_DATE)
