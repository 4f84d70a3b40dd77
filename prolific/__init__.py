"""Models, renderers and click commands for the Prolific research platform."""

__version__ = "0.1.0"