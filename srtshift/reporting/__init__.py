from .terminal import locate, render_diagnostic

__all__ = ["locate", "render_diagnostic"]
