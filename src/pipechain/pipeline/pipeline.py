"""Pipeline – reusable, ordered bundle of middleware."""
from __future__ import annotations

from typing import Iterator

from pipechain.http.types import Handler, Middleware


class Pipeline:
    """An immutable group of middleware.

    Middleware are stored in *composition order*, the reverse of the order
    they were declared in. Wrapping a handler by walking the stored sequence
    front to back therefore leaves the first declared middleware outermost,
    so it is the first to run its pre-logic and the last to run its
    post-logic.

    Use :func:`build` rather than the constructor.
    """

    __slots__ = ("_stack",)

    def __init__(self, stack: tuple[Middleware, ...] = ()) -> None:
        self._stack = stack

    def declared(self) -> tuple[Middleware, ...]:
        """Middleware in the order they were passed to :func:`build`."""
        return tuple(reversed(self._stack))

    def apply(self, handler: Handler) -> Handler:
        """Wrap *handler* with every middleware of this pipeline."""
        for middleware in self._stack:
            handler = middleware(handler)
        return handler

    def __iter__(self) -> Iterator[Middleware]:
        return iter(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pipeline):
            return NotImplemented
        return len(self._stack) == len(other._stack) and all(
            a is b for a, b in zip(self._stack, other._stack)
        )

    def __hash__(self) -> int:
        return hash(tuple(id(m) for m in self._stack))

    def __add__(self, other: "Pipeline") -> "Pipeline":
        """Concatenate; middleware of the left operand fire first."""
        if not isinstance(other, Pipeline):
            return NotImplemented
        return Pipeline(other._stack + self._stack)

    def __repr__(self) -> str:
        names = ", ".join(getattr(m, "__name__", repr(m)) for m in self.declared())
        return f"Pipeline([{names}])"


def build(*middleware: Middleware) -> Pipeline:
    """Create a :class:`Pipeline` from middleware listed in firing order.

    ``build(with_hostname, must_authenticate)`` runs ``with_hostname`` first
    and ``must_authenticate`` second. No validation is done; ``build()``
    returns an empty pipeline that wraps nothing.
    """
    return Pipeline(tuple(reversed(middleware)))


__all__ = ["Pipeline", "build"]
