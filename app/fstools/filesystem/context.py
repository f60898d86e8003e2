"""Shared collaborators for filesystem operations.

A FilesystemContext bundles the path normalizer, the translation table
and the filesystem backend. It is created once (usually from the loaded
configuration) and passed to the scanner and operators, replacing
process-wide mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fstools.core.i18n import Translator
from fstools.filesystem.backend import FilesystemBackend, LocalBackend
from fstools.filesystem.errors import FilesystemError
from fstools.filesystem.normalizer import PathNormalizer

if TYPE_CHECKING:
    from fstools.core.config import FsToolsConfig


@dataclass(slots=True)
class FilesystemContext:
    """Collaborators shared by the scanner and operators.

    Attributes:
        normalizer: Cleans every path crossing an operation boundary.
        translator: Resolves failure keys to localized messages.
        backend: Capability set used for existence checks and listings.
    """

    normalizer: PathNormalizer = field(default_factory=PathNormalizer)
    translator: Translator = field(default_factory=Translator)
    backend: FilesystemBackend = field(default_factory=LocalBackend)

    @classmethod
    def from_config(
        cls,
        config: FsToolsConfig,
        backend: FilesystemBackend | None = None,
    ) -> FilesystemContext:
        """Build a context from loaded configuration."""
        return cls(
            normalizer=PathNormalizer(root_path=config.root_path, separator=config.separator),
            translator=Translator(config.translations, default_message=config.default_message),
            backend=backend or LocalBackend(),
        )

    def clean(self, path: object) -> str:
        """Clean a path with the context's normalizer."""
        return self.normalizer.clean(path)

    def error(
        self,
        error_cls: type[FilesystemError],
        key: str,
        *,
        path: str | None = None,
        detail: str | None = None,
    ) -> FilesystemError:
        """Create a failure carrying its translated message.

        Args:
            error_cls: FilesystemError subclass to instantiate.
            key: Translation key of the failure.
            path: Offending path, appended to the message.
            detail: Low-level detail, e.g. the OSError text.

        Returns:
            The exception instance, ready to be raised.
        """
        message = self.translator.describe(key, path=path, detail=detail)
        return error_cls(key, message, path=path)
