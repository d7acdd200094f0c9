"""Staged, all-or-nothing file writer.

Generators never write directly.  They stage every file body (and any
directory that must exist without files) into a :class:`FilePlan`, then call
:meth:`FilePlan.commit`, which

1. checks that every body encodes as UTF-8 and every target is free,
   dropping files flagged ``skip_if_exists`` that are already present,
2. writes the files in staging order, and
3. if anything fails midway, removes every file and directory this commit
   created (including a file whose write was cut short) before re-raising.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from sv_modular.errors import TargetExistsError, UnencodableContentError
from sv_modular.utils import print_warning


class GeneratedFile(BaseModel):
    """A staged file body."""

    path: str  # Relative to the project root, forward slashes
    content: str
    skip_if_exists: bool = False


class WriteResult(BaseModel):
    """What a commit put on disk."""

    written: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)
    directories: list[Path] = Field(default_factory=list)


class FilePlan:
    """Collects generated files for one module and commits them together."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.files: list[GeneratedFile] = []
        self.directories: list[str] = []

    def add(self, path: str, content: str, *, skip_if_exists: bool = False) -> None:
        self.files.append(
            GeneratedFile(path=path, content=content, skip_if_exists=skip_if_exists)
        )

    def add_directory(self, path: str) -> None:
        self.directories.append(path)

    def target(self, relative: str) -> Path:
        return self.root / relative

    # -- Preflight ---------------------------------------------------------

    def preflight(self) -> tuple[list[GeneratedFile], list[Path]]:
        """Split staged files into ``(to_write, skipped)``.

        Raises:
            UnencodableContentError: If a staged body cannot be encoded as
                UTF-8.
            TargetExistsError: If a file not flagged ``skip_if_exists`` is
                already on disk.
        """
        to_write: list[GeneratedFile] = []
        skipped: list[Path] = []
        conflicts: list[Path] = []

        for staged in self.files:
            target = self.target(staged.path)
            try:
                staged.content.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise UnencodableContentError(target, exc.reason) from exc
            if target.exists():
                if staged.skip_if_exists:
                    skipped.append(target)
                else:
                    conflicts.append(target)
            else:
                to_write.append(staged)

        if conflicts:
            raise TargetExistsError(conflicts)
        return to_write, skipped

    # -- Commit ------------------------------------------------------------

    def commit(self) -> WriteResult:
        """Write every staged file, or none of them."""
        to_write, skipped = self.preflight()
        result = WriteResult(skipped=skipped)
        created_dirs: list[Path] = []
        touched: list[Path] = []

        try:
            for directory in self.directories:
                _make_dirs(self.target(directory), created_dirs)
            for staged in to_write:
                target = self.target(staged.path)
                _make_dirs(target.parent, created_dirs)
                # Recorded first: a failed write may still leave a partial file.
                touched.append(target)
                target.write_text(staged.content, encoding="utf-8")
        except BaseException:
            _rollback(touched, created_dirs)
            raise

        result.written = touched
        result.directories = created_dirs
        return result


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_dirs(path: Path, created: list[Path]) -> None:
    """``mkdir -p`` that records every directory it actually creates."""
    missing: list[Path] = []
    current = path
    while not current.exists():
        missing.append(current)
        current = current.parent
    for directory in reversed(missing):
        directory.mkdir()
        created.append(directory)


def _rollback(written: list[Path], created_dirs: list[Path]) -> None:
    """Remove what a failed commit left behind, newest first."""
    leftovers: list[Path] = []
    for path in reversed(written):
        try:
            path.unlink(missing_ok=True)
        except OSError:
            leftovers.append(path)
    for directory in reversed(created_dirs):
        try:
            directory.rmdir()
        except OSError:
            leftovers.append(directory)
    if leftovers:
        print_warning(
            "Could not roll back: " + ", ".join(str(p) for p in leftovers)
        )
