from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
import hydra
from omegaconf import DictConfig
import uvicorn
import os

from app.routers import (
    dispatches,
    events,
    reports,
)
from app.dependencies import seed_backend

import prodreport

description = """
The prodreport API generates production reports from machine ON / OFF events and dispatched products as a web service.
"""

app = FastAPI(
    title="prodreport API",
    description=description,
    version=prodreport.VERSION,
    license_info={
        "name": "MIT License",
        "url": "https://mit-license.org/",
    },
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(events.router)
app.include_router(dispatches.router)
app.include_router(reports.router)


@app.get("/", response_model=str)
async def root():
    return f"Welcome to prodreport API version {prodreport.VERSION}. Check out the documentation at {app.docs_url}"


@hydra.main(config_path="conf", config_name="config", version_base=None)
def prodreport_app(cfg: DictConfig) -> None:
    prodreport.set_logging(cfg.logging.level, cfg.logging.handler)
    seed_backend(cfg.data.events_path, cfg.data.dispatches_path)
    if os.environ.get("ROOT_PATH"):
        uvicorn.run(app, root_path=os.environ.get("ROOT_PATH"), host=cfg.fastapi.host, port=cfg.fastapi.port)
    else:
        uvicorn.run(app, host=cfg.fastapi.host, port=cfg.fastapi.port)

if __name__ == "__main__":
    prodreport_app()
