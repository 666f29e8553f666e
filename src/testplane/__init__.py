"""testplane - Django test discovery, streaming execution and live status."""

__version__ = "0.1.0"
