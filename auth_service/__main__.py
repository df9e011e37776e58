"""Allow `python -m auth_service`."""

from .main import run

run()
