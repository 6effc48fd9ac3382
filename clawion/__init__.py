"""clawion: file-backed mission tracker for cooperating agents."""

__version__ = "0.3.0"
