"""Shared value types for the path engines and the typed layer."""

from dataclasses import dataclass
from enum import Enum
from typing import TypedDict


class PathType(Enum):
    """Which grammar a typed value is tagged with."""
    UNIX = "unix"
    WINDOWS = "windows"


class ComponentKind(Enum):
    """Role of a single path component."""
    PREFIX = "prefix"        # Windows only: C:, \\server\share, \\?\...
    ROOT_DIR = "root_dir"    # leading separator
    CUR_DIR = "cur_dir"      # "."
    PARENT_DIR = "parent_dir"  # ".."
    NORMAL = "normal"        # any other segment


class WindowsPrefixKind(Enum):
    """The six prefix forms recognized by the Windows grammar."""
    VERBATIM = "verbatim"            # \\?\pictures
    VERBATIM_UNC = "verbatim_unc"    # \\?\UNC\server\share
    VERBATIM_DISK = "verbatim_disk"  # \\?\C:
    DEVICE_NS = "device_ns"          # \\.\COM42
    UNC = "unc"                      # \\server\share
    DISK = "disk"                    # C:


@dataclass(frozen=True)
class WindowsPrefix:
    """A parsed Windows prefix and the raw bytes it spans."""
    kind: WindowsPrefixKind
    raw: bytes

    def is_verbatim(self) -> bool:
        return self.kind in (
            WindowsPrefixKind.VERBATIM,
            WindowsPrefixKind.VERBATIM_UNC,
            WindowsPrefixKind.VERBATIM_DISK,
        )

    def has_implicit_root(self) -> bool:
        """Every prefix except a plain drive letter implies a root."""
        return self.kind is not WindowsPrefixKind.DISK

    @property
    def disk(self) -> bytes:
        """Drive letter for DISK / VERBATIM_DISK prefixes, else ``b""``."""
        if self.kind is WindowsPrefixKind.DISK:
            return self.raw[:1]
        if self.kind is WindowsPrefixKind.VERBATIM_DISK:
            return self.raw[4:5]
        return b""


class NativeBinding(TypedDict):
    """Types bound as native for the running platform (see typed_path.native)."""
    path_type: PathType
    encoding: type
    path: type
    path_buf: type
    component: type
    utf8_encoding: type
    utf8_path: type
    utf8_path_buf: type
    utf8_component: type
