"""
Exception hierarchy for chromashade.

Two families are raised by the library:

- ConfigurationError: the kernel name or the bound parameters do not fit the
  kernel's declared signature. Raised once per shading pass, at bind time.
- DomainError: an argument makes the arithmetic undefined (zero divisor,
  empty color array, degenerate bounds). Raised per invocation.
"""


class ChromashadeError(Exception):
    """Base class for every error raised by chromashade."""


class ConfigurationError(ChromashadeError):
    """A kernel cannot be resolved or bound as requested."""


class KernelNotFoundError(ConfigurationError, KeyError):
    """No kernel is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"'{self.name}' is not a registered kernel"


class SignatureMismatchError(ConfigurationError, TypeError):
    """The bound parameters do not match the kernel's declared signature."""


class DomainError(ChromashadeError, ValueError):
    """An argument lies outside the domain where the computation is defined."""


__all__ = [
    "ChromashadeError",
    "ConfigurationError",
    "KernelNotFoundError",
    "SignatureMismatchError",
    "DomainError",
]
