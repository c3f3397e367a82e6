"""rrdtool translation layer and HTTP service."""

__version__ = "0.1.0"
