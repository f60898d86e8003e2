"""Filesystem layer: path normalization, directory scanning and file/folder operations.

This module exposes the path normalizer, the recursive directory
scanner with its filter model, the file and folder operators, and the
failure taxonomy they raise.
"""

from fstools.filesystem.backend import FilesystemBackend, LocalBackend
from fstools.filesystem.context import FilesystemContext
from fstools.filesystem.errors import (
    DestinationExists,
    ErrorKind,
    FilesystemError,
    NotADirectory,
    PreconditionViolation,
    SourceNotFound,
    UnderlyingIOFailure,
)
from fstools.filesystem.files import FileOperator
from fstools.filesystem.folders import FolderOperator
from fstools.filesystem.models import ScanFilter, TargetKind
from fstools.filesystem.normalizer import PathNormalizer
from fstools.filesystem.scanner import DirectoryScanner

__all__ = [
    "DestinationExists",
    "DirectoryScanner",
    "ErrorKind",
    "FileOperator",
    "FilesystemBackend",
    "FilesystemContext",
    "FilesystemError",
    "FolderOperator",
    "LocalBackend",
    "NotADirectory",
    "PathNormalizer",
    "PreconditionViolation",
    "ScanFilter",
    "SourceNotFound",
    "TargetKind",
    "UnderlyingIOFailure",
]
