"""CLI helpers for launching the emulator."""

__all__ = ["start_server"]
