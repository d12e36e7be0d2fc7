"""NECL Core: reader and evaluator for NECL configuration sources."""

from .config import ParseOptions
from .document import Document
from .environment import Environment
from .evaluator import evaluate, evaluate_text
from .loader import load
from .model import Attribute, Block, Kind
from .errors import (
    EmptyAttributeName,
    InvalidArgumentType,
    InvalidCondition,
    InvalidFileExtension,
    InvalidFunctionInCondition,
    InvalidProjectionSource,
    IOFailure,
    MissingOutcome,
    NECLError,
    NestedArrayNotAllowed,
    NonIntegerOperand,
    UnbalancedBraces,
    UnclassifiableValue,
    UnknownAttributeReference,
    UnknownComparator,
    UnknownFunction,
    UnknownOperator,
    WrongArgumentCount,
)
from .repl import NECLRepl

__all__ = [
    "evaluate",
    "evaluate_text",
    "load",
    "Document",
    "Environment",
    "ParseOptions",
    "Attribute",
    "Block",
    "Kind",
    "NECLRepl",
    "NECLError",
    "EmptyAttributeName",
    "InvalidArgumentType",
    "InvalidCondition",
    "InvalidFileExtension",
    "InvalidFunctionInCondition",
    "InvalidProjectionSource",
    "IOFailure",
    "MissingOutcome",
    "NestedArrayNotAllowed",
    "NonIntegerOperand",
    "UnbalancedBraces",
    "UnclassifiableValue",
    "UnknownAttributeReference",
    "UnknownComparator",
    "UnknownFunction",
    "UnknownOperator",
    "WrongArgumentCount",
]
