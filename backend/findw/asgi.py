"""ASGI entrypoint: ``uvicorn findw.asgi:app``."""

from findw.main import create_app

app = create_app()
