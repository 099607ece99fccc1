"""Bootstrap (composition root) for TRACKLY.

Wires concrete adapters to the service-layer handlers, reads configuration and
hands entrypoints a ready `AppContainer`.

Import rules:
- Entry points import *this* package, not adapters or the service layer's
  wiring directly.
- Inner layers must not import `trackly.bootstrap`.
"""

from .bootstrap import (
    AppContainer,
    bootstrap,
    build_message_bus,
    build_write_uow,
    inject_dependencies,
)

__all__ = [
    "AppContainer",
    "bootstrap",
    "build_message_bus",
    "build_write_uow",
    "inject_dependencies",
]
