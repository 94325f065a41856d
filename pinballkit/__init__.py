"""Switch debouncing, LED strand animation and machine layouts for pinball machines."""

__version__ = "0.1.0"
__all__ = ["debounce", "layout", "pixelstrand"]