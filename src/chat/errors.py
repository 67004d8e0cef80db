"""Error taxonomy for the conversation controller.

Remote failures are wrapped into these types at the session boundary and
caught at the controller's operation boundary. None reach the UI.
"""


class ChatError(Exception):
    """Base class for conversation failures."""


class SessionInitError(ChatError):
    """Remote session could not be created (config, network, auth, quota)."""


class ValidationError(ChatError):
    """Outbound text is empty or whitespace-only."""


class SendError(ChatError):
    """Reply call failed after the user turn was committed."""


class SendTimeoutError(SendError):
    """Reply did not arrive within the configured timeout."""
