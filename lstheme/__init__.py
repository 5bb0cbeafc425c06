"""Terminal colour themes built from LS_COLORS and EXA_COLORS values."""

__version__ = "0.1.0"
__all__ = ["lsc", "style", "theme", "ui_styles"]