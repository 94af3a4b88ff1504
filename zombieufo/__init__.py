"""A pygame side-scrolling arcade game in which a zombie battles a UFO."""

__version__ = "0.1.0"