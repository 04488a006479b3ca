"""A top-down zombie survival shooter built on pygame, with a windowless game simulation."""

__version__ = "0.1.0"