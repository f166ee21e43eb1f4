"""Chat bot toolkit: a configuration launcher and standalone plugin modules."""

__version__ = "1.6.1"