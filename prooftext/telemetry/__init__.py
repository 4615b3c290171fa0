"""Logging helpers for CLI-observable command activity."""

from .logger import RunLogger

__all__ = ["RunLogger"]
