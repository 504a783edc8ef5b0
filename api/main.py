import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import settings
from items.router import router as items_router

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI()

# Browser origins allowed to call this API (CORS_ORIGINS, comma-separated).
origins = settings.cors_origins()
if origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(items_router, tags=["items"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "airtable items api"}
