# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Description: main.py
# -----------------------------------------------------------------------------
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.AppContainer import get_app_container
from api.routers import health, index, search

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = get_app_container()
    # Load the embedding model once, before the first request is served
    container.startup()
    try:
        yield
    finally:
        container.shutdown()


app = FastAPI(title="SlateHub Search API", lifespan=lifespan)
app.include_router(health.router)
app.include_router(search.router)
app.include_router(index.router)
