"""
Exception types raised by eitherkit.

All failures are synchronous and raised at the call site. Exceptions built by
user-supplied factories (for example in ``or_else_throw``) are propagated
unchanged and are not part of this hierarchy.
"""


class EitherKitError(Exception):
    """Base class for eitherkit errors."""


class InvalidArgumentError(EitherKitError, ValueError):
    """An argument was absent or otherwise unusable."""


class MapperContractError(InvalidArgumentError):
    """A user-supplied function returned None or the wrong container type."""


class NoValuePresentError(EitherKitError, LookupError):
    """An empty container was unwrapped without a default."""

    def __init__(self, message: str = "No value present") -> None:
        super().__init__(message)


class ConfigurationError(EitherKitError):
    """Library configuration could not be loaded."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid eitherkit configuration: " + "; ".join(problems))


def require_non_none(value, message: str = "value must not be None"):
    """Return value, or raise InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(message)
    return value


__all__ = [
    "ConfigurationError",
    "EitherKitError",
    "InvalidArgumentError",
    "MapperContractError",
    "NoValuePresentError",
    "require_non_none",
]
