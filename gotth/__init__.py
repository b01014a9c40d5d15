"""gotth — bootstrap and drive a Go + templ + Tailwind project."""

__version__ = "0.1.0"
