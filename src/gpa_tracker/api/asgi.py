"""ASGI entrypoint for the GPA tracker API."""

from gpa_tracker.api.app import create_app
from gpa_tracker.containers import build_container

app = create_app(build_container())
