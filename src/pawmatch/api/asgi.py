"""ASGI entrypoint for the pawmatch API."""

from pawmatch.api.app import create_app
from pawmatch.containers import build_container

app = create_app(build_container())
