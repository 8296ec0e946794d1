"""Storm Draft - HotS Storm League draft assistant."""

__version__ = "0.1.0"
