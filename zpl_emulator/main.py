"""ASGI entry point for the ZPL printer emulator. Uses factory pattern for app creation."""

from zpl_emulator.core.dependencies import get_settings
from zpl_emulator.core.factory import create_app

settings = get_settings()
app = create_app(settings)
