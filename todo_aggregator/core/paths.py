# todo_aggregator/core/paths.py
"""
Central path management for todo-aggregator.

All on-disk locations owned by the tool live under a workspace directory
inside the vault: {vault}/.todo-aggregator/
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Optional

WORKSPACE_DIRNAME = ".todo-aggregator"


class AggregatorPaths:
    """
    Path helpers for a vault.

    Usage:
        from todo_aggregator.core.paths import AggregatorPaths

        config_path = AggregatorPaths.config("/notes")

        # Override workspace for testing
        AggregatorPaths.set_workspace("/tmp/test_workspace")
    """

    _workspace_override: Optional[Path] = None

    @classmethod
    def set_workspace(cls, path: Optional[str | Path]) -> None:
        """Override the workspace directory. Pass None to reset."""
        if path is None:
            cls._workspace_override = None
        else:
            cls._workspace_override = Path(path)

    @classmethod
    def reset(cls) -> None:
        cls._workspace_override = None

    @classmethod
    def workspace(cls, vault: str | Path | None = None) -> Path:
        """
        The workspace directory.

        Default: {vault}/.todo-aggregator/ with vault defaulting to CWD.
        """
        if cls._workspace_override is not None:
            return cls._workspace_override
        root = Path(vault) if vault is not None else Path.cwd()
        return root / WORKSPACE_DIRNAME

    @classmethod
    def config(cls, vault: str | Path | None = None) -> Path:
        """Settings file: {workspace}/config.yaml"""
        return cls.workspace(vault) / "config.yaml"


def normalize_document_path(path: str) -> str:
    """
    Canonical vault-relative form of a document path.

    "./a//b.md" becomes "a/b.md". An empty path stays empty.

    Raises:
        ValueError: If the path is absolute or contains "..".
    """
    if path == "":
        return path

    pure = PurePosixPath(path)
    if pure.is_absolute():
        raise ValueError(f"Document path must be relative to the vault: {path!r}")
    if ".." in pure.parts:
        raise ValueError(f"Document path must stay inside the vault: {path!r}")
    return pure.as_posix()
