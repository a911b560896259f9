from .core import GameSession
from .io import write_csv, write_manifest
from .stats import summarize

__all__ = ["GameSession", "write_csv", "write_manifest", "summarize"]
