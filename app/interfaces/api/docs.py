"""OpenAPI document and Swagger UI configuration."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from app.config import Settings

DOCS_URL = "/api-docs"
OPENAPI_URL = "/api-docs/openapi.json"

TAGS_METADATA: list[dict[str, str]] = [
    {"name": "Auth", "description": "Token issuance and the current user"},
    {"name": "Notifications", "description": "User notifications"},
    {"name": "Health", "description": "Service probes"},
]


def configure_api_docs(app: FastAPI, settings: Settings) -> None:
    """Publish the API description with the configured metadata and server."""

    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=settings.api_title,
            version=settings.api_version,
            description=settings.api_description,
            routes=app.routes,
            tags=TAGS_METADATA,
            servers=[{"url": settings.base_url, "description": f"{settings.environment} server"}],
        )
        components = schema.setdefault("components", {})
        components.setdefault("securitySchemes", {})["bearerAuth"] = {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi  # type: ignore[method-assign]
