"""ASGI entrypoint for the recipe tracker API."""

from recipe_tracker.api.app import create_app
from recipe_tracker.containers import build_container

app = create_app(build_container())
