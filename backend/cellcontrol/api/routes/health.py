"""Health Probe — unversioned liveness endpoint.

Invariants:
    - GET /health always returns 200 {"status": "ok"} if the process is up
    - No downstream checks (database state does not affect the answer)
"""

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness probe."""
    return {"status": "ok"}
