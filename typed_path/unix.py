"""Unix path grammar."""

import os
from dataclasses import dataclass
from typing import List, Optional

from .common import Path, PathBuf, Utf8PathMixin, bind_path_types, parse_segments
from .encoding import Component, Encoding, ParsedComponent
from .structures import ComponentKind, PathType, WindowsPrefix

__all__ = [
    "UnixComponent", "UnixEncoding", "UnixPath", "UnixPathBuf",
    "Utf8UnixComponent", "Utf8UnixEncoding", "Utf8UnixPath", "Utf8UnixPathBuf",
]

SEPARATOR = b"/"
_SEPARATOR_BYTE = SEPARATOR[0]


@dataclass(frozen=True)
class UnixComponent(Component):
    """One component of a Unix path."""
    kind: ComponentKind
    raw: bytes

    def as_bytes(self) -> bytes:
        return self.raw

    def is_root(self) -> bool:
        return self.kind is ComponentKind.ROOT_DIR

    def is_current(self) -> bool:
        return self.kind is ComponentKind.CUR_DIR

    def is_parent(self) -> bool:
        return self.kind is ComponentKind.PARENT_DIR

    def is_normal(self) -> bool:
        return self.kind is ComponentKind.NORMAL


class Utf8UnixComponent(UnixComponent):
    """UnixComponent taken from a UTF-8 validated path."""

    def as_str(self) -> str:
        return self.raw.decode("utf-8")


def _is_separator(byte: int) -> bool:
    return byte == _SEPARATOR_BYTE


class UnixEncoding(Encoding):
    """
    POSIX grammar: "/" is the only separator and there are no prefixes.

    Any byte other than "/" may appear in a component.
    """

    label = "unix"
    path_type = PathType.UNIX
    separator = SEPARATOR
    component_type = UnixComponent

    def parse_prefix(self, data: bytes) -> Optional[WindowsPrefix]:
        return None

    def parse(self, data: bytes) -> List[ParsedComponent]:
        parsed: List[ParsedComponent] = []
        has_root = data.startswith(SEPARATOR)
        if has_root:
            parsed.append((0, self.component(ComponentKind.ROOT_DIR, SEPARATOR)))
        parsed.extend(parse_segments(self, data, 1 if has_root else 0, has_root, _is_separator))
        return parsed

    def has_root(self, data: bytes) -> bool:
        return data.startswith(SEPARATOR)

    def is_absolute(self, data: bytes) -> bool:
        return self.has_root(data)

    def push(self, buf: bytearray, other: bytes) -> None:
        if self.is_absolute(other):
            buf[:] = other
            return
        if buf and not buf.endswith(SEPARATOR):
            buf += SEPARATOR
        buf += other

    def to_std_str(self, data: bytes) -> str:
        if b"\x00" in data:
            raise ValueError("path contains an interior NUL byte")
        # Same as os.fsdecode on POSIX: undecodable bytes survive as surrogates
        return os.fsdecode(data)


class Utf8UnixEncoding(UnixEncoding):
    """Unix grammar over UTF-8 validated bytes."""

    label = "utf8-unix"
    utf8 = True
    component_type = Utf8UnixComponent


class UnixPath(Path):
    """Borrowed Unix path."""
    __slots__ = ()
    _encoding = UnixEncoding()


class UnixPathBuf(PathBuf):
    """Owned Unix path."""
    __slots__ = ()
    _encoding = UnixEncoding()


class Utf8UnixPath(Utf8PathMixin, Path):
    """Borrowed Unix path holding valid UTF-8."""
    __slots__ = ()
    _encoding = Utf8UnixEncoding()


class Utf8UnixPathBuf(Utf8PathMixin, PathBuf):
    """Owned Unix path holding valid UTF-8."""
    __slots__ = ()
    _encoding = Utf8UnixEncoding()


bind_path_types(UnixPath, UnixPathBuf)
bind_path_types(Utf8UnixPath, Utf8UnixPathBuf)
