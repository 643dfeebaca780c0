"""Audio device switcher for launcher workflows."""

__version__ = "0.3.0"
