"""
Exceptions raised by tokenbridge.

Every failure that aborts a parse or transform call derives from
``TokenBridgeError``. Recoverable problems are never raised; they are recorded
in the transformation report instead.
"""


class TokenBridgeError(Exception):
    """Base class for all tokenbridge errors.

    Attributes:
        message: The bare error message, without any decoration
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(TokenBridgeError):
    """Raised when a Figma payload has none of the accepted shapes."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid Figma input: {', '.join(errors)}")


class TokenSchemaError(TokenBridgeError):
    """Raised when a token structure violates a schema invariant."""


class PathCollisionError(TokenSchemaError):
    """Raised when two tokens claim overlapping positions in a token tree.

    Examples:
        A token at ``color`` followed by a token at ``color.red`` would need
        ``color`` to be both a leaf and a group.
    """

    def __init__(self, path: tuple[str, ...], reason: str):
        self.path = path
        super().__init__(f"Token path collision at '{'.'.join(path)}': {reason}")


class SourceOverwriteError(TokenBridgeError):
    """Raised when the write target is the file the theme was read from."""

    def __init__(self, source_file_key: str, target_file_key: str):
        self.source_file_key = source_file_key
        self.target_file_key = target_file_key
        super().__init__(
            f"Target file matches source file ({source_file_key}). "
            "Set allow_source_overwrite=True to proceed."
        )


class UnsupportedOperationModeError(TokenBridgeError):
    """Raised when an operation mode other than create-only is requested."""

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(
            f"Operation mode '{mode}' is not supported; "
            "only 'create-only' requests can be built"
        )


class PluginNotConnectedError(TokenBridgeError):
    """Raised when executing against a write client whose plugin is offline."""

    def __init__(self) -> None:
        super().__init__(
            "Figma plugin is not connected. Ensure Figma Desktop is running "
            "with the write-server plugin active."
        )
