# src/app/main.py
from __future__ import annotations
import logging
import sys
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from src.app.config import settings
from src.app.routers.influencers import router as influencers_router
from src.app.routers.recipes import router as recipes_router
from src.app.routers.recipe_form import router as recipe_form_router

# Plain stdout logging (fine for dev and containers)
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

log = logging.getLogger(__name__)

app = FastAPI(title="Recipe Admin API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ADMIN_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(influencers_router)
app.include_router(recipes_router)
app.include_router(recipe_form_router)


@app.exception_handler(APIError)
async def database_error_handler(request: Request, exc: APIError) -> JSONResponse:
    # Database errors reach the client as-is, only the status is rewritten
    log.error("Database error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=502, content={"detail": exc.message or str(exc)})


@app.get("/health")
def health():
    return {"ok": True}
