"""Error types raised while reading and evaluating NECL sources."""

from __future__ import annotations


class NECLError(Exception):
    """Base exception for all NECL reader errors."""

    def __init__(self, message: str, line: int | None = None, source: str | None = None):
        self.message = message
        self.line = line
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.line is None:
            return self.message
        if self.source is None:
            return f"line {self.line}: {self.message}"
        return f"line {self.line}: {self.source}\n{self.message}"

    def locate(self, line: int, source: str) -> NECLError:
        """Attach a source location unless one is already set."""
        if self.line is None:
            self.line = line
            self.source = source
            self.args = (self._format_message(),)
        return self


# ---------------------------------------------------------------------------
# File wrapper
# ---------------------------------------------------------------------------

class InvalidFileExtension(NECLError):
    pass


class IOFailure(NECLError):
    pass


# ---------------------------------------------------------------------------
# Attributes and values
# ---------------------------------------------------------------------------

class UnclassifiableValue(NECLError):
    """No rule of the classification cascade matched the value."""


class EmptyAttributeName(NECLError):
    pass


class NestedArrayNotAllowed(NECLError):
    pass


class UnbalancedBraces(NECLError):
    """A block was never closed, or a ``}`` has no opening block."""


# ---------------------------------------------------------------------------
# Operators and functions
# ---------------------------------------------------------------------------

class WrongArgumentCount(NECLError):
    pass


class UnknownAttributeReference(NECLError):
    pass


class NonIntegerOperand(NECLError):
    pass


class InvalidArgumentType(NECLError):
    """A function argument refers to an attribute of the wrong kind."""


class UnknownComparator(NECLError):
    pass


class UnknownOperator(NECLError):
    pass


class UnknownFunction(NECLError):
    pass


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

class InvalidFunctionInCondition(NECLError):
    pass


class InvalidCondition(NECLError):
    """The condition of an ``if`` expression is not boolean-valued."""


class MissingOutcome(NECLError):
    pass


class InvalidProjectionSource(NECLError):
    pass
