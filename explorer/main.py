import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from explorer.config import settings
from explorer.routers import explorers
from explorer.services.catalog_client import build_catalog_client


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    app.state.catalog_client = build_catalog_client()
    try:
        yield
    finally:
        await app.state.catalog_client.aclose()


app = FastAPI(
    title="Pokédex Explorer",
    description="Browse the first-generation Pokémon from the PokeAPI",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(explorers.router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# Serve the frontend (index.html at "/") if the directory exists.
# Mounted last so it does not shadow the API routes.
frontend_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "frontend")
if os.path.isdir(frontend_dir):
    app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("explorer.main:app", host="127.0.0.1", port=8000, reload=False)
