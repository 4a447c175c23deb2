"""Back up the photos shared to Aura digital picture frames to a local directory."""

__version__ = "0.3.0"