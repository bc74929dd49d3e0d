"""Replay stored chat transcripts as Agent Client Protocol session updates."""

__version__ = "0.1.0"
