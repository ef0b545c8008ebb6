"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from enum import Enum

from pydantic import BaseModel, Field


class SenderKind(str, Enum):
    """Kind of command sender reported by the game server."""

    PLAYER = "player"
    CONSOLE = "console"
    BLOCK = "block"


class SenderModel(BaseModel):
    """The sender that issued a command."""

    name: str = Field(..., min_length=1, max_length=32, description="Sender name as shown in game")
    kind: SenderKind = Field(SenderKind.PLAYER, description="player, console or block")


class CommandRequest(BaseModel):
    """Request model for a forwarded command."""

    sender: SenderModel
    arguments: list[str] = Field(
        default_factory=list, description="Command arguments, in the order typed"
    )


class CommandResponse(BaseModel):
    """Response model listing the chat lines the sender received."""

    messages: list[str]
