"""FastAPI adapter – serve pipechain handlers from FastAPI / Starlette apps."""
from pipechain.adapters.fastapi.endpoint import handler_route, mount_handler, to_endpoint

__all__ = ["handler_route", "mount_handler", "to_endpoint"]
