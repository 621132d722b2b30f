"""ASGI entrypoint for the FatSecret nutrition API."""

from fatsecret_nutrition.api.app import create_app
from fatsecret_nutrition.containers import build_container

app = create_app(build_container())
