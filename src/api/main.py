"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.api.contracts_router import api as contracts_api
from src.database.contracts import ContractStore, seed_contracts
from src.error_handler import register_error_handlers
from src.utils.config_loader import ServerConfig, load_server_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(store: Optional[ContractStore] = None, config: Optional[ServerConfig] = None) -> FastAPI:
    """
    Build the API around a contract store.

    A fresh store seeded with the sample contracts is created when none is
    given, so every app instance owns its own data.
    """
    config = config or ServerConfig()

    app = FastAPI(
        title=config.title,
        description="Mock CRUD API for insurance contracts held in memory",
        version=config.version,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.contract_store = store if store is not None else ContractStore(seed_contracts())
    register_error_handlers(app)

    # ============================================================================
    # ENDPOINTS
    # ============================================================================
    @app.get("/", tags=["Health"], response_class=PlainTextResponse)
    async def root():
        return "Insurance Contracts Mock API is running!"

    app.include_router(contracts_api)

    logger.info("Contracts API ready with %d contracts", len(app.state.contract_store))
    return app


settings = load_server_config()
app = create_app(config=settings)
