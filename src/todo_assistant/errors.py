"""Exception hierarchy for the assistant."""


class TodoAssistantError(Exception):
    """Base class for all assistant errors."""


class TodoStoreError(TodoAssistantError):
    """Raised by the todo store."""


class ValidationError(TodoStoreError):
    """Tool arguments failed validation."""


class NotFoundError(TodoStoreError):
    """No todo exists with the given id."""


class StoreError(TodoStoreError):
    """The underlying database failed."""


class ProtocolError(TodoAssistantError):
    """The model broke the JSON action contract."""


class InvalidJSONError(ProtocolError):
    """The completion was not a JSON object."""


class UnknownActionTypeError(ProtocolError):
    """The completion carried a missing or unrecognized ``type`` tag."""

    def __init__(self, action_type: object) -> None:
        super().__init__(f"Unknown action type: {action_type}")
        self.action_type = action_type


class TransportError(TodoAssistantError):
    """The completion endpoint was unreachable or returned an error."""
