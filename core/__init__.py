"""Core models, logging and command helpers."""
