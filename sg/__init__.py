"""sg: rule registry, renderer and self-checks for the Flutter style and release guides."""

__version__ = "0.4.0"
