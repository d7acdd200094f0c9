"""Exceptions raised by the scaffolder.

Every failure the CLI reports to the user derives from ``ScaffoldError``.
Filesystem errors raised while writing files are *not* wrapped: they
propagate unchanged after the writer has rolled back its partial output.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all user-facing scaffolding failures."""


class InvalidModuleNameError(ScaffoldError):
    """Raised when a frontend module name normalizes to an empty string."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid module name: {raw!r}")


class InvalidModulePathError(ScaffoldError):
    """Raised when a module path contains no usable segment."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid module path: {raw!r} (expected e.g. 'bands/song')")


class ModuleExistsError(ScaffoldError):
    """Raised when the target module directory is already present."""

    def __init__(self, module: str, path: Path) -> None:
        self.module = module
        self.path = path
        super().__init__(f"Module '{module}' already exists at {path}")


class TargetExistsError(ScaffoldError):
    """Raised when one or more staged output files are already on disk."""

    def __init__(self, paths: list[Path]) -> None:
        self.paths = paths
        listing = ", ".join(str(p) for p in paths)
        super().__init__(f"Refusing to overwrite existing files: {listing}")


class ManifestCorruptError(ScaffoldError):
    """Raised when ``module.json`` exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"Manifest {path} is unreadable ({reason}). "
            "Fix or remove it, then run the command again."
        )


class ManifestExistsError(ScaffoldError):
    """Raised by ``init`` when a manifest is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path.name} already exists in {path.parent}")


class UnencodableContentError(ScaffoldError):
    """Raised when a staged file body cannot be encoded as UTF-8.

    Usually caused by undecodable bytes in the module name on the command
    line, which Python hands over as lone surrogates.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        # Lone surrogates would also break the console stream.
        printable = str(path).encode("utf-8", "backslashreplace").decode("utf-8")
        super().__init__(
            f"Cannot write {printable} as UTF-8 ({reason}). "
            "Check the module name for undecodable characters."
        )
