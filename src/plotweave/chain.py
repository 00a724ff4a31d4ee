"""Deferred combine chains and data splicing.

A chain is an unevaluated sequence of ``+`` steps whose first element is a
deferred call::

    chain = lazy.new_plot(mapping=aes("displ", "hwy")) + geom_point()

Evaluating ``add3(mpg, chain, geom_smooth())`` passes ``mpg`` as the first
argument of ``new_plot`` and only then runs the chain, so data can be piped
in front of a plot definition, e.g. ``mpg.pipe(add3, chain, geom_smooth())``.
"""

from __future__ import annotations

import builtins
import inspect
from collections import ChainMap
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from types import FrameType
from typing import Any

from plotweave.config.logging import get_logger
from plotweave.errors import InternalChainError, InvalidComponentError
from plotweave.operators import MISSING, add

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Operator:
    symbol: str


# Chain nodes are recognised by this exact object, not by an equal one.
ADD = Operator("%+%")


@dataclass(frozen=True, slots=True)
class Call:
    """A function call that has not been made yet."""

    func: Callable[..., Any] | str
    args: tuple[Any, ...] = ()
    kwargs: tuple[tuple[str, Any], ...] = ()

    @property
    def name(self) -> str:
        if isinstance(self.func, str):
            return self.func
        return getattr(self.func, "__name__", repr(self.func))

    def prepend(self, value: Any) -> Call:
        """Return a copy with ``value`` as the new first positional argument."""
        return replace(self, args=(value, *self.args))

    def __add__(self, other: Any) -> Combine:
        return Combine(left=self, right=other)


@dataclass(frozen=True, slots=True)
class Combine:
    """One ``left + right`` step of a chain."""

    left: Any
    right: Any
    third: Any = MISSING
    op: Operator = ADD

    def __add__(self, other: Any) -> Combine:
        return Combine(left=self, right=other)


type Expr = Call | Combine


class LazyCalls:
    """Build deferred calls: ``lazy.new_plot(...)`` or ``lazy(func, ...)``."""

    def __call__(self, func: Callable[..., Any] | str, *args: Any, **kwargs: Any) -> Call:
        return Call(func=func, args=args, kwargs=tuple(kwargs.items()))

    def __getattr__(self, name: str) -> Callable[..., Call]:
        if name.startswith("_"):
            raise AttributeError(name)

        def deferred(*args: Any, **kwargs: Any) -> Call:
            return Call(func=name, args=args, kwargs=tuple(kwargs.items()))

        deferred.__name__ = name
        return deferred


lazy = LazyCalls()


def is_chain_node(node: Any) -> bool:
    return isinstance(node, Combine) and node.op is ADD


def chain_depth(chain: Any) -> int:
    """Number of combine steps along the left spine of ``chain``."""
    depth = 0
    while is_chain_node(chain):
        depth += 1
        chain = chain.left
    return depth


def splice_data(data: Any, chain: Expr) -> Expr:
    """Return a new chain whose earliest call receives ``data`` first.

    Nodes on the path from the root to that call are rebuilt; every other
    subtree is shared with ``chain``, which is left untouched.
    """
    if not is_chain_node(chain):
        return _insert_first(chain, data)

    path: list[Combine] = []
    node = chain
    while True:
        if node.left is None:
            raise InternalChainError(
                f"Malformed chain: combine node at depth {len(path)} has no left operand."
            )
        path.append(node)
        if not is_chain_node(node.left):
            break
        node = node.left

    child = _insert_first(node.left, data)
    for parent in reversed(path):
        child = replace(parent, left=child)
    return child


def insert_data_into_chain(
    data: Any, chain: Expr, env: Mapping[str, Any] | None = None
) -> Any:
    """Splice ``data`` into ``chain`` and evaluate the result.

    Names in the chain resolve in ``env``, or in the caller's namespace when
    ``env`` is omitted.
    """
    if env is None:
        env = _namespace_of_caller()
    rewritten = splice_data(data, chain)
    logger.debug("chain.splice", depth=chain_depth(chain))
    return _evaluate(rewritten, env)


def evaluate(expr: Any, env: Mapping[str, Any] | None = None) -> Any:
    """Evaluate a chain or deferred call; other values evaluate to themselves."""
    if env is None:
        env = _namespace_of_caller()
    return _evaluate(expr, env)


def caller_namespace(frame: FrameType | None) -> Mapping[str, Any]:
    """Locals, then globals, then builtins of ``frame``."""
    if frame is None:
        return ChainMap({}, vars(builtins))
    return ChainMap(dict(frame.f_locals), frame.f_globals, vars(builtins))


def _namespace_of_caller() -> Mapping[str, Any]:
    frame = inspect.currentframe()
    try:
        # Skip this helper and the public function that called it.
        return caller_namespace(frame.f_back.f_back)
    finally:
        del frame


def _insert_first(terminal: Any, data: Any) -> Call:
    if not isinstance(terminal, Call):
        raise InvalidComponentError(
            f"Can't insert data into `{type(terminal).__name__}`. "
            "A chain must start with a deferred call such as `lazy.new_plot()`."
        )
    return terminal.prepend(data)


def _evaluate(expr: Any, env: Mapping[str, Any]) -> Any:
    if isinstance(expr, Call):
        func = _resolve(expr.func, env)
        args = [_evaluate(arg, env) for arg in expr.args]
        kwargs = {key: _evaluate(value, env) for key, value in expr.kwargs}
        return func(*args, **kwargs)

    if is_chain_node(expr):
        if expr.left is None:
            raise InternalChainError("Malformed chain: combine node has no left operand.")
        left = _evaluate(expr.left, env)
        if expr.third is MISSING:
            return add(left, _evaluate(expr.right, env))
        spliced = _evaluate(splice_data(left, expr.right), env)
        return add(spliced, _evaluate(expr.third, env))

    return expr


def _resolve(func: Callable[..., Any] | str, env: Mapping[str, Any]) -> Callable[..., Any]:
    if not isinstance(func, str):
        return func

    head, *rest = func.split(".")
    if head in env:
        target = env[head]
    else:
        import plotweave

        try:
            target = getattr(plotweave, head)
        except AttributeError:
            raise NameError(f"name {head!r} is not defined") from None

    for attr in rest:
        target = getattr(target, attr)
    return target
