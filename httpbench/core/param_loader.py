"""Variable-parameter file loading."""

import aiofiles
import logging
from pathlib import Path
from typing import List, Optional


def split_lines(content: bytes) -> List[str]:
    """
    Split raw file content on "\\n" only, dropping one trailing "\\r" per line.

    Bytes that are not valid UTF-8 are kept via surrogateescape.
    """
    raw_lines = content.split(b"\n")
    if raw_lines[-1] == b"":
        raw_lines.pop()
    return [
        (line[:-1] if line.endswith(b"\r") else line).decode("utf-8", "surrogateescape")
        for line in raw_lines
    ]


class ParamLoader:
    """Loads the per-line substitution values for a run."""

    def __init__(self, file_path: Optional[str]):
        self.file_path = Path(file_path) if file_path else None
        self.lines: List[str] = []
        self.logger = logging.getLogger(__name__)

    async def load(self) -> List[str]:
        """
        Read every line of the parameter file into memory.

        A file that cannot be opened yields no lines rather than an error,
        so the run falls back to the bare URL / static POST data.

        Returns:
            List of lines without their line terminators
        """
        self.lines = []
        if self.file_path is None:
            return self.lines

        try:
            async with aiofiles.open(self.file_path, "rb") as f:
                content = await f.read()
        except OSError as e:
            self.logger.warning(f"Cannot read parameter file {self.file_path}: {e}")
            return self.lines

        self.lines = split_lines(content)
        self.logger.info(f"Loaded {len(self.lines)} parameter lines from {self.file_path}")
        return self.lines
