"""Persist rendered label documents to disk."""

from __future__ import annotations

import logging

from zpl_emulator.contracts.errors import WriteError

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Writes artifact bytes to a path, creating or truncating the file.

    Parent directories are never created; a missing or read-only directory
    surfaces as ``WriteError``.
    """

    def write(self, path: str, data: bytes) -> None:
        """Write ``data`` to ``path`` in full."""
        try:
            with open(path, "wb") as handle:
                handle.write(data)
        except (OSError, ValueError) as exc:
            reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
            raise WriteError(path, reason) from exc
        logger.debug("Wrote %s bytes to %s", len(data), path)
