# dashboard/db/engine.py

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create the process-wide engine. Callers own its lifecycle and must
    dispose() it at shutdown.
    """
    connect_args = {}
    if url.startswith("sqlite"):
        # Pooled connections get handed to FastAPI's worker threads
        connect_args["check_same_thread"] = False

    return create_engine(url, echo=echo, future=True, connect_args=connect_args)


def get_engine(request: Request) -> Engine:
    # Set up by the application lifespan
    return request.app.state.engine
