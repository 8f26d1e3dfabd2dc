"""Log text sources implementing LogSourcePort."""

import asyncio
from pathlib import Path


class StringLogSource:
    """In-memory implementation of LogSourcePort.

    Holds already-read text. Suitable for testing and for callers that
    receive the log contents from elsewhere (an upload, a clipboard).
    """

    def __init__(self, text: str) -> None:
        self._text = text

    async def read_text(self) -> str:
        """Return the held text."""
        return self._text


class FileLogSource:
    """File-backed implementation of LogSourcePort.

    The file is read in a worker thread so the event loop is not blocked.
    Read and decode errors propagate to the caller.

    Args:
        path: Path of the log file.
        encoding: Text encoding of the file.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    async def read_text(self) -> str:
        """Read the whole file as text."""
        return await asyncio.to_thread(self._read)

    def _read(self) -> str:
        # newline="" keeps "\r\n" intact; the parser trims each line itself.
        with self._path.open(encoding=self._encoding, newline="") as fh:
            return fh.read()
