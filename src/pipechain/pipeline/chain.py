"""Pipeline – fluent builder chaining pipelines onto a base handler."""
from __future__ import annotations

import dataclasses

from pipechain.http.types import Handler
from pipechain.pipeline.pipeline import Pipeline


@dataclasses.dataclass(frozen=True)
class PipeHandler:
    """Base handler plus the pipelines to wrap it with, in addition order.

    Values are immutable: :meth:`pipe` returns a new builder and leaves the
    receiver untouched, so builders derived from a common ancestor never see
    each other's pipelines.
    """

    base: Handler
    pipelines: tuple[Pipeline, ...] = ()

    def pipe(self, pipeline: Pipeline) -> "PipeHandler":
        """Return a builder with *pipeline* added after the existing ones."""
        return dataclasses.replace(self, pipelines=self.pipelines + (pipeline,))

    def handler(self) -> Handler:
        """Compose and return the final handler.

        The first piped pipeline ends up outermost. Pipelines are walked in
        reverse addition order and each one's stored (already reversed)
        middleware are applied front to back. With no pipelines the base
        handler is returned as is.
        """
        handler = self.base
        for pipeline in reversed(self.pipelines):
            handler = pipeline.apply(handler)
        return handler


def start(handler: Handler) -> PipeHandler:
    """Begin a chain around the terminal *handler*."""
    return PipeHandler(base=handler)


__all__ = ["PipeHandler", "start"]
