class OpenSearchDslError(Exception):
    """Base class for every error raised while building a request body."""


class InvalidArgument(OpenSearchDslError, ValueError):
    """A setter received a value outside the set it accepts."""


class MissingRequiredField(OpenSearchDslError, ValueError):
    """A builder was compiled without an option its family requires."""

    def __init__(self, owner: str, option: str) -> None:
        super().__init__(f'{owner} requires `{option}` to be set')
        self.owner = owner
        self.option = option
