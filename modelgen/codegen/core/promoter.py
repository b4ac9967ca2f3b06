"""
Staging and promotion of generated files.

Files are rendered into a temporary staging directory and then copied
into the output directory, which is cleared first.
"""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Union

from .exceptions import PromotionError
from ...logging_config import get_logger

logger = get_logger(__name__)


@contextmanager
def staging_directory(work_dir: Union[str, Path], prefix: str) -> Iterator[Path]:
    """
    Create a temporary staging directory under ``work_dir``.

    The directory is removed on exit whether or not the block succeeded.
    """
    try:
        path = Path(tempfile.mkdtemp(prefix=prefix, dir=work_dir))
    except OSError as e:
        raise PromotionError(f"Cannot create staging directory in {work_dir}: {e}") from e

    logger.debug("Staging directory %s", path)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


def collect_files(root: Path) -> List[Path]:
    """Return every regular file below ``root``, sorted."""
    return sorted(p for p in root.rglob("*") if p.is_file())


def promote(staging_dir: Path, target_dir: Union[str, Path]) -> List[Path]:
    """
    Replace ``target_dir`` with the files from ``staging_dir``.

    The target is deleted recursively if it exists. Files are copied by
    basename, so nested staging directories are flattened.

    Returns:
        Paths of the promoted files

    Raises:
        PromotionError: On any filesystem failure
    """
    target = Path(target_dir)
    promoted = []
    try:
        if target.exists():
            logger.warning("Clearing directory %s", target)
            shutil.rmtree(target)
        target.mkdir(parents=True, exist_ok=True)

        for source in collect_files(staging_dir):
            destination = target / source.name
            shutil.copyfile(source, destination)
            promoted.append(destination)
    except OSError as e:
        raise PromotionError(f"Failed to promote {staging_dir} to {target}: {e}") from e

    logger.info("Promoted %d files to %s", len(promoted), target)
    return promoted
