# /attenote/services/delete_helpers/orphan_sweep.py

"""
Periodic safety net that converges the media directory to the set of paths
referenced by NoteMedia rows.

Coordinated deletes reclaim files inline, but references can also disappear
through partial failures or out-of-band edits. The sweep walks the media
root once, deletes every regular file no row points at, and re-reads the
referenced set right before each deletion so a file referenced by a write
that landed mid-sweep is left in place. It never deletes directories.
"""

import logging
import os
from pathlib import Path
from typing import List, Protocol, Set, Union

from ...models.delete_model import OrphanSweepReport
from ..media_cleaner import resolve_media_path

logger = logging.getLogger(__name__)


class MediaReferenceSource(Protocol):
    def get_all_file_paths(self) -> List[str]: ...


def collect_referenced_paths(references: MediaReferenceSource, media_root: Union[str, Path]) -> Set[str]:
    """Resolves every referenced media path to its absolute, normalized form."""
    referenced: Set[str] = set()
    for file_path in references.get_all_file_paths():
        normalized_path = file_path.strip()
        if normalized_path:
            referenced.add(os.path.normpath(resolve_media_path(normalized_path, media_root)))
    return referenced


def sweep_orphaned_media(references: MediaReferenceSource, media_root: Union[str, Path]) -> OrphanSweepReport:
    """
    Runs a single top-to-bottom pass over `media_root`.

    A failure to read the initial reference set propagates: without it no
    file can be judged safely. Per-file failures (deletion errors or a failed
    re-check) are logged and recorded, and the pass moves on.
    """
    root = Path(media_root).absolute()
    report = OrphanSweepReport()
    if not root.is_dir():
        logger.info("Media root %s does not exist; nothing to sweep.", root)
        return report

    referenced_paths = collect_referenced_paths(references, root)

    candidates = []
    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue
        report.scanned_files += 1
        if os.path.normpath(path) not in referenced_paths:
            candidates.append(path)

    for candidate in candidates:
        try:
            latest_references = collect_referenced_paths(references, root)
            if os.path.normpath(candidate) in latest_references:
                logger.debug("Skipping newly referenced file: %s", candidate.name)
                report.skipped_files.append(str(candidate))
                continue

            # A file already removed by someone else counts as reclaimed.
            candidate.unlink(missing_ok=True)
            logger.debug("Deleted orphaned file: %s", candidate.name)
            report.deleted_files.append(str(candidate))
        except Exception as e:
            logger.warning("Failed to delete %s: %s", candidate.name, e)
            report.failed_files.append(str(candidate))

    logger.info(
        "Orphan sweep of %s finished: scanned=%d deleted=%d skipped=%d failed=%d",
        root, report.scanned_files, len(report.deleted_files),
        len(report.skipped_files), len(report.failed_files),
    )
    return report
