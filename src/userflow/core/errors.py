"""Error types raised by the encoders and the claim key builder."""


class InvalidArgumentError(Exception):
    """Raised when caller-supplied input violates the platform contract.

    Malformed application ids, blank messages and attribute names failing the
    naming pattern all end up here. Handlers may turn it into a validation
    response or let it propagate.
    """

    def __init__(self, message: str, argument: str | None = None):
        self.argument = argument
        if argument:
            message = f"{argument}: {message}"
        super().__init__(message)


class ProgrammerMisuseError(TypeError):
    """Raised when an action is encoded for an event kind that does not accept it."""

    pass
