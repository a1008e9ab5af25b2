"""Serve a composed handler from FastAPI.

Run with::

    pip install "pipechain[fastapi]" uvicorn
    uvicorn docs.examples.serve_app:app

Then::

    curl -i localhost:8000/hello
    curl -i -H "Authorization: Bearer demo" localhost:8000/hello
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from pipechain import build, start
from pipechain.adapters.fastapi import mount_handler
from pipechain.config import EnvSettingsLoader, PipechainSettings
from pipechain.http import write_json
from pipechain.middlewares import require_bearer, standard_pipeline
from pipechain.observability import CorrelationContext, JsonLoggerFactory

settings = EnvSettingsLoader().load(PipechainSettings)
JsonLoggerFactory.from_settings(settings)

common = standard_pipeline(settings)
secured = build(require_bearer(lambda token: "demo-user" if token == "demo" else None))


def hello(writer: Any, request: Any) -> None:
    ctx = CorrelationContext.require()
    write_json(writer, 200, {"hello": ctx.principal, "correlation_id": ctx.correlation_id})


app = FastAPI()
mount_handler(app, "/hello", start(hello).pipe(common).pipe(secured).handler())
