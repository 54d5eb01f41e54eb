"""Conectidade: match people who want to teach a skill with people who want to learn it."""

__version__ = "1.0.0"
