"""CheatHub: terminal client for the CheatSlips cheat catalog."""

__version__ = "0.1.0"
