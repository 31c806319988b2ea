from fastapi import APIRouter

from app.config import get_settings

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health")
def health_check() -> dict[str, object]:
    """Liveness probe."""

    return {
        "success": True,
        "data": {"status": "healthy", "environment": get_settings().environment},
    }
