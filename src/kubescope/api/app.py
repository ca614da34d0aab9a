# src/kubescope/api/app.py
"""
FastAPI application factory for the KubeScope API.
"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kubescope import __version__
from kubescope.api.routers import config as config_router
from kubescope.api.routers import kubectl
from kubescope.core.config import config
from kubescope.core.exceptions import InvalidKubeconfigError, KubectlError, KubeScopeError

logger = logging.getLogger(__name__)


async def _invalid_kubeconfig_handler(request: Request, exc: InvalidKubeconfigError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _kubectl_error_handler(request: Request, exc: KubectlError) -> JSONResponse:
    logger.error(f"kubectl failed for {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def _kubescope_error_handler(request: Request, exc: KubeScopeError) -> JSONResponse:
    logger.error(f"Could not build snapshot for {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="KubeScope API",
        description="Resource usage and topology of Kubernetes namespaces, computed from kubectl output.",
        version=__version__,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidKubeconfigError, _invalid_kubeconfig_handler)
    app.add_exception_handler(KubectlError, _kubectl_error_handler)
    app.add_exception_handler(KubeScopeError, _kubescope_error_handler)

    # Register API routers
    app.include_router(kubectl.router, prefix="/api/v1", tags=["Kubectl"])
    app.include_router(config_router.router, prefix="/api/v1", tags=["Config"])

    return app


def main():
    """Entry point for the kubescope-api console script."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = create_app()
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
