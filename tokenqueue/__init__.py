"""Service-counter token machine with queue length and waiting-time estimates."""

__version__ = "0.1.0"
__all__ = ["text", "machine", "cli"]