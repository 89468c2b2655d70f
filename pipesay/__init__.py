"""pipesay - render piped text in a speech balloon above a cow."""

__version__ = "0.1.0"
