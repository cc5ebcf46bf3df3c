"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathcommand import __version__
from pathcommand.config import settings
from pathcommand.engine.registry import register_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pathcommand_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svg-path-command",
        description="SVG path data normalizer — absolute coordinates, split chains, cubic curves",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules to trigger registration
    register_transforms()

    from pathcommand.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
