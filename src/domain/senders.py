"""
Command senders - Who issued a command.

The game server hands every command to the domain together with its sender.
Only a Player is tied to a connected in-game actor; console and command-block
senders can issue commands but cannot own an account.
"""

from dataclasses import dataclass, field


@dataclass
class CommandSender:
    """
    Anything able to issue a command and receive chat lines back.

    Lines are kept in order so the bridge can return them to the game server.
    """

    name: str
    messages: list[str] = field(default_factory=list)

    def send_message(self, message: str) -> None:
        """Deliver one line of text to the sender."""
        self.messages.append(message)


@dataclass
class Player(CommandSender):
    """Sender tied to a connected, controllable in-game player."""


@dataclass
class ConsoleSender(CommandSender):
    """The server console."""


@dataclass
class BlockCommandSender(CommandSender):
    """A command block executing a command."""
