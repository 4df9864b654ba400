"""Frame buffer drawing, bitmap fonts, packet protocol, animations and an app runner for two RGB565 screens."""

__version__ = "0.1.0"