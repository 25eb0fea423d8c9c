"""
Health check and introspection routes
"""

from typing import Dict, List, Tuple

from fastapi import APIRouter, Depends, FastAPI, Request
from starlette.routing import Mount

from app.config import Settings
from app.utils.dependencies import get_app_settings

router = APIRouter()


@router.get("/healthz")
async def health_check():
    """Liveness probe"""
    return {"ok": True}


@router.get("/debug/env")
async def debug_env(settings: Settings = Depends(get_app_settings)):
    """Which credentials are configured, without revealing them"""
    return settings.credentials_present()


def describe_routes(app: FastAPI) -> List[str]:
    """One line per operation; aliases of the same handler share a line"""
    described: Dict[Tuple[str, str], List[str]] = {}

    for path, operations in app.openapi()["paths"].items():
        for method, operation in operations.items():
            described.setdefault((method.upper(), operation["summary"]), []).append(path)

    static = [
        f"GET {route.path}/map.html"
        for route in app.routes
        if isinstance(route, Mount) and route.name == "public"
    ]
    return [f"{method} {' | '.join(paths)}" for (method, _), paths in described.items()] + static


@router.get("/debug/routes")
async def debug_routes(request: Request):
    """Active routes, generated from the OpenAPI schema and static mounts"""
    return {"ok": True, "routes": describe_routes(request.app)}
