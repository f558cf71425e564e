"""Build a Hugo blog and publish the generated site to its hosting repository."""

__version__ = "1.0.0"
