"""Terminal UI helpers: panels, error rendering and the picker."""

from .errors import render_error
from .picker import make_selector, select_choice

__all__ = ["make_selector", "render_error", "select_choice"]
