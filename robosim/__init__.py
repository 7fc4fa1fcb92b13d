"""Robot simulation toolkit: sensors, reading buffers, topic registry, command queue and robot loop."""

__version__ = "1.0.0"