"""FastAPI application entry point for the Chronos core."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chronos.api.middleware.error_handler import global_exception_handler
from chronos.api.middleware.logging import StructuredLoggingMiddleware
from chronos.api.routes.attribution import router as attribution_router
from chronos.api.routes.fraud import router as fraud_router
from chronos.api.routes.health import router as health_router
from chronos.api.routes.rules import router as rules_router
from chronos.config import settings
from chronos.domains.fraud.config import FraudConfig
from chronos.domains.rules import RulesConfig, RulesEngine
from chronos.shared.logging import setup_logging

logger = structlog.get_logger()

# Track app start time for uptime calculation
APP_START_TIME: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown logic."""
    global APP_START_TIME
    APP_START_TIME = time.time()
    setup_logging(settings.log_level, json_logs=settings.log_json)

    logger.info(
        "chronos_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        rule_count=len(app.state.rules_engine.get_rules()),
    )

    yield

    logger.info("chronos_shutting_down")


app = FastAPI(
    title="Chronos Core",
    description="Attribution, campaign automation and bot-risk scoring",
    version=settings.app_version,
    lifespan=lifespan,
)

# Caller-owned instances shared by the routes
app.state.rules_engine = RulesEngine.from_config(RulesConfig.from_env())
app.state.fraud_config = FraudConfig.from_env()

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Structured logging middleware
app.add_middleware(StructuredLoggingMiddleware)

# Domain errors map to 4xx; anything else is a 500
app.add_exception_handler(ValueError, global_exception_handler)
app.add_exception_handler(LookupError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Register routers
app.include_router(health_router)
app.include_router(attribution_router)
app.include_router(rules_router)
app.include_router(fraud_router)


def get_uptime() -> int:
    """Get application uptime in seconds."""
    if APP_START_TIME == 0.0:
        return 0
    return int(time.time() - APP_START_TIME)
