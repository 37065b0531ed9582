"""Generate platform style sources from a Figma style catalog."""

__version__ = "0.3.0"
