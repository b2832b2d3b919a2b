"""
Persistence of generated artifacts.
"""

from pathlib import Path
from typing import Union

from ...logging_config import get_logger

logger = get_logger(__name__)


def save_to_file(file_path: Union[str, Path], content: str) -> Path:
    """
    Write text to a file, creating parent directories as needed.

    Args:
        file_path: Destination path
        content: Text to write (UTF-8)

    Returns:
        The written path
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))
    return path
