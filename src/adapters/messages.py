"""
Message catalogue adapter - Implements Messenger protocol.

Maps each MessageKey to the English text shown in chat. Individual texts
can be overridden, e.g. to translate them.
"""

from collections.abc import Mapping

from src.domain.ports import MessageKey
from src.domain.senders import CommandSender

DEFAULT_MESSAGES: dict[MessageKey, str] = {
    MessageKey.USAGE_REGISTER: "Usage: /register <password> <ConfirmPassword>",
    MessageKey.PASSWORD_MATCH_ERROR: "Passwords didn't match, check them again!",
    MessageKey.INCOMPLETE_EMAIL_SETTINGS: (
        "Error: not all required settings are set for sending emails. "
        "Please contact an admin."
    ),
    MessageKey.INVALID_EMAIL: "Please provide a valid email address!",
    MessageKey.PASSWORD_TOO_LONG: "Your password is too long! Please try with another one!",
    MessageKey.REGISTER_SUCCESS: "Successfully registered!",
    MessageKey.REGISTER_EMAIL_SUCCESS: (
        "Successfully registered!\nA password has been sent to your email address."
    ),
    MessageKey.NAME_ALREADY_REGISTERED: "You already have registered this username!",
    MessageKey.LOGIN_SUCCESS: "Successful login!",
}


class CatalogMessenger:
    """
    Implements Messenger protocol from an in-memory catalogue.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, overrides: Mapping[MessageKey, str] | None = None) -> None:
        self._messages = {**DEFAULT_MESSAGES, **(overrides or {})}

    def text_for(self, key: MessageKey) -> str:
        """Return the text configured for a message key."""
        return self._messages[key]

    def send(self, sender: CommandSender, key: MessageKey) -> None:
        """Send the text for `key` to the sender, one chat line per text line."""
        for line in self.text_for(key).split("\n"):
            sender.send_message(line)
