import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.analyze_case import router as analyze_case_router
from .config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Legal Intelligence Workspace", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=[
        "authorization",
        "x-client-info",
        "apikey",
        "content-type",
    ],
)

app.include_router(analyze_case_router)


def run() -> None:
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
