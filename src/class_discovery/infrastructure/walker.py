"""
Filesystem directory walker.

Default DirectoryWalker used when the host application does not inject one.
"""

import fnmatch
from collections.abc import Iterator
from pathlib import Path

from class_discovery.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class FileSystemWalker:
    """
    Depth-first walker over the local filesystem.

    Features:
    - Entries are visited in lexicographic order per directory, so repeated
      walks over an unchanged tree yield the same sequence.
    - Symlinked directories are not followed, preventing cycles.
    - max_depth=0 restricts the walk to the directory's own files.
    """

    def walk(self, directory: str | Path, pattern: str, max_depth: int | None = None) -> Iterator[Path]:
        """
        Yield absolute paths of files under ``directory`` matching ``pattern``.

        Args:
            directory: Directory to walk
            pattern: fnmatch-style file name glob (e.g. ``*.py``)
            max_depth: Maximum subdirectory depth (None for unlimited)

        Raises:
            FileNotFoundError: If ``directory`` does not exist
            NotADirectoryError: If ``directory`` is not a directory
        """
        root = Path(directory).absolute()
        logger.debug("directory_walk_started", directory=str(root), pattern=pattern, max_depth=max_depth)
        yield from self._walk_directory(root, pattern, max_depth, current_depth=0)

    def _walk_directory(
        self, directory: Path, pattern: str, max_depth: int | None, current_depth: int
    ) -> Iterator[Path]:
        for item in sorted(directory.iterdir(), key=lambda p: p.name):
            if item.is_dir():
                if item.is_symlink():
                    continue
                if max_depth is None or current_depth < max_depth:
                    yield from self._walk_directory(item, pattern, max_depth, current_depth + 1)
            elif item.is_file() and fnmatch.fnmatch(item.name, pattern):
                yield item
