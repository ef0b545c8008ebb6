"""
API v1 routes.

Defines the endpoints the game server forwards player commands to.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_register_command
from src.api.models import CommandRequest, CommandResponse, SenderKind, SenderModel
from src.domain.registration import RegisterCommand
from src.domain.senders import BlockCommandSender, CommandSender, ConsoleSender, Player

router = APIRouter(tags=["v1"])


def build_sender(sender: SenderModel) -> CommandSender:
    """Create the domain sender matching the reported sender kind."""
    if sender.kind is SenderKind.PLAYER:
        return Player(name=sender.name)
    if sender.kind is SenderKind.CONSOLE:
        return ConsoleSender(name=sender.name)
    return BlockCommandSender(name=sender.name)


@router.post(
    "/commands/register",
    response_model=CommandResponse,
    responses={422: {"description": "Validation error"}},
    summary="Run the register command",
    description="Forward a /register command issued in game. "
    "The response lists every chat line the sender should see, in order.",
)
async def register_command(
    request_data: CommandRequest,
    command: RegisterCommand = Depends(get_register_command),
) -> CommandResponse:
    """
    Run /register for a sender.

    - **sender**: Name and kind of the sender
    - **arguments**: Command arguments as typed

    User input problems are reported as messages, never as HTTP errors.
    """
    sender = build_sender(request_data.sender)
    command.execute_command(sender, request_data.arguments)
    return CommandResponse(messages=sender.messages)
