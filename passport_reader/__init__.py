"""Passport page field extraction through a remote multimodal model."""

__version__ = "0.1.0"
