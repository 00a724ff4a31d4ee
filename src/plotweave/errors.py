"""Exceptions raised while composing plots."""

from __future__ import annotations


class PlotweaveError(Exception):
    """Base class for user-facing composition errors."""


class MissingOperandError(PlotweaveError, TypeError):
    """Raised when the combine operator is used with a single argument."""


class InvalidComponentError(PlotweaveError, TypeError):
    """Raised when a value cannot be added to a plot or theme."""


class FunctionComponentError(InvalidComponentError):
    """Raised when an uncalled function is added to a plot."""


class ProtoAdditionError(PlotweaveError, TypeError):
    """Raised when two internal proto objects are added together."""


class InternalChainError(RuntimeError):
    """Raised when the chain rewriter meets a malformed chain node.

    This signals a defect in chain construction, not a user mistake.
    """
