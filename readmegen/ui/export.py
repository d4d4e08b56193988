"""Copy/download helpers for generated README text."""

from pathlib import Path
from typing import Optional, Union

README_FILENAME = "README.md"
README_MEDIA_TYPE = "text/markdown"


def export_text(readme: str) -> str:
    """Text used by copy and download actions: the generated README, trimmed."""
    return readme.strip()


def write_readme(readme: str, path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Write the trimmed README to ``path`` (default: README.md).

    Returns:
        The written path, or None when there was nothing to write
    """
    text = export_text(readme)
    if not text:
        return None
    target = Path(path) if path else Path(README_FILENAME)
    if target.is_dir():
        target = target / README_FILENAME
    target.write_text(text, encoding="utf-8")
    return target
