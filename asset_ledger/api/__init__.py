"""
Asset Ledger API Application Factory
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI

from .token import router as token_router
from .liquidity import router as liquidity_router
from .oracle import router as oracle_router
from .governance import router as governance_router
from .. import __version__
from ..config import LedgerConfig, get_config
from ..facade import AssetLedger
from ..logging_config import setup_logging


def create_app(ledger: Optional[AssetLedger] = None, config: Optional[LedgerConfig] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        ledger: Ledger to serve; one is built from config when omitted
        config: Settings; the process-wide configuration when omitted
    """
    config = config or get_config()
    setup_logging(config.log_level, "asset_ledger", config.log_format, config.log_file)

    if ledger is None:
        ledger = AssetLedger(
            owner=config.owner_identity,
            price_reporter=config.price_reporter_identity,
            config=config
        )

    app = FastAPI(
        title="Asset Ledger API",
        description="Token ledger with allowances, liquidity stakes, price feed and governance",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.ledger = ledger
    app.state.config = config

    app.include_router(token_router, prefix="/token", tags=["Token"])
    app.include_router(liquidity_router, prefix="/liquidity", tags=["Liquidity"])
    app.include_router(oracle_router, prefix="/oracle", tags=["Oracle"])
    app.include_router(governance_router, prefix="/governance", tags=["Governance"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "asset_ledger_api",
            "version": __version__
        }

    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "Asset Ledger API",
            "version": __version__,
            "ledger": ledger.address,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "token": "/token",
                "liquidity": "/liquidity",
                "oracle": "/oracle",
                "governance": "/governance",
            }
        }

    return app


def run_server(host: Optional[str] = None, port: Optional[int] = None, debug: bool = False):
    """Run the FastAPI server"""
    config = get_config()
    uvicorn.run(
        "asset_ledger.api:create_app",
        factory=True,
        host=host or config.api_host,
        port=port or config.api_port,
        reload=debug,
        log_level="info"
    )
