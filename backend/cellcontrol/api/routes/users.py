"""Users Handler — create and list users under the versioned API group.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
      (failures become 400 via api/error_handlers.py)
    - Any service failure collapses into one generic 500 message per route;
      the cause is logged, never returned to the client
    - 201 body carries only a confirmation message (no id)

Design Decisions:
    - Handler is a class holding its service: wiring passed in by create_app,
      no module-level state
    - register_routes() mounts onto a caller-owned router (the /api/v1 group)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from cellcontrol.core.errors import CellControlError
from cellcontrol.core.repository_protocols import UserServiceLike
from cellcontrol.schemas.user import (
    ErrorResponse, MessageResponse, UserCreate, UserResponse,
)

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "usuario creado exitosamente"
CREATE_FAILED_MESSAGE = "no se pudo crear el usuario"
LIST_FAILED_MESSAGE = "no se pudo obtener usuarios"


def _error_code(exc: Exception) -> str:
    if isinstance(exc, CellControlError):
        return exc.code
    return "INTERNAL_ERROR"


class UserHandler:
    """HTTP adapter over the user service."""

    def __init__(self, service: UserServiceLike):
        self._service = service

    def register_routes(self, router: APIRouter) -> None:
        router.add_api_route(
            "/usuarios", self.create_user, methods=["POST"],
            status_code=status.HTTP_201_CREATED,
            response_model=MessageResponse,
            responses={500: {"model": ErrorResponse}},
        )
        router.add_api_route(
            "/usuarios", self.list_users, methods=["GET"],
            response_model=list[UserResponse],
            responses={500: {"model": ErrorResponse}},
        )

    async def create_user(self, body: UserCreate):
        """Create a user from the validated request body."""
        try:
            await self._service.create_user(
                body.nombre, body.apellido, body.email, body.reparto,
            )
        except Exception as e:
            logger.error(
                f"Failed to create user: {e}",
                extra={"error_code": _error_code(e)}, exc_info=True,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": CREATE_FAILED_MESSAGE},
            )
        return MessageResponse(message=CREATED_MESSAGE)

    async def list_users(self):
        """List every stored user."""
        try:
            users = await self._service.list_users()
        except Exception as e:
            logger.error(
                f"Failed to list users: {e}",
                extra={"error_code": _error_code(e)}, exc_info=True,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": LIST_FAILED_MESSAGE},
            )
        return [UserResponse.model_validate(u) for u in users]
