"""Exceptions raised while extracting and rendering rustdoc items."""


class RustdocMdError(Exception):
    """Base class for all rustdoc-md failures."""


class UnsupportedInputError(RustdocMdError):
    """Raised for item kinds or type constructs outside the rendering grammar."""


class MissingItemError(RustdocMdError, KeyError):
    """Raised when an item id (or its package) is absent from the loaded graphs."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class ConfigError(RustdocMdError):
    """Raised for malformed configuration or input documents."""
