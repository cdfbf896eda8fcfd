"""Windows path grammar."""

from dataclasses import dataclass
from typing import Callable, List, Optional

from .common import Path, PathBuf, Utf8PathMixin, bind_path_types, parse_segments
from .encoding import Component, Encoding, ParsedComponent
from .structures import ComponentKind, PathType, WindowsPrefix, WindowsPrefixKind

__all__ = [
    "WindowsComponent", "WindowsEncoding", "WindowsPath", "WindowsPathBuf",
    "Utf8WindowsComponent", "Utf8WindowsEncoding", "Utf8WindowsPath", "Utf8WindowsPathBuf",
]

SEPARATOR = b"\\"
ALT_SEPARATOR = b"/"

_BACKSLASH = SEPARATOR[0]
_SLASH = ALT_SEPARATOR[0]
_COLON = ord(":")


def _is_separator(byte: int) -> bool:
    return byte in (_BACKSLASH, _SLASH)


def _is_verbatim_separator(byte: int) -> bool:
    # \\?\ paths are passed to the OS untouched, so "/" is an ordinary byte
    return byte == _BACKSLASH


def _find_separator(data: bytes, start: int, is_sep: Callable[[int], bool]) -> int:
    """Index of the first separator at or after ``start``, else ``len(data)``."""
    for index in range(start, len(data)):
        if is_sep(data[index]):
            return index
    return len(data)


def _is_drive(data: bytes, start: int) -> bool:
    return (len(data) >= start + 2
            and data[start:start + 1].isalpha()
            and data[start + 1] == _COLON)


def parse_prefix(data: bytes) -> Optional[WindowsPrefix]:
    """Recognize the leading prefix token of a Windows path.

    Forms, in the order they are tried:
        \\\\?\\UNC\\server\\share   VERBATIM_UNC
        \\\\?\\C:                  VERBATIM_DISK
        \\\\?\\name                VERBATIM
        \\\\.\\device              DEVICE_NS
        \\\\server\\share          UNC (server and share must be non-empty)
        C:                       DISK
    """
    if data.startswith(b"\\\\?\\"):
        if data.startswith(b"UNC\\", 4):
            server_end = _find_separator(data, 8, _is_verbatim_separator)
            share_end = server_end
            if server_end < len(data):
                share_end = _find_separator(data, server_end + 1, _is_verbatim_separator)
            return WindowsPrefix(WindowsPrefixKind.VERBATIM_UNC, data[:share_end])
        if _is_drive(data, 4) and (len(data) == 6 or data[6] == _BACKSLASH):
            return WindowsPrefix(WindowsPrefixKind.VERBATIM_DISK, data[:6])
        end = _find_separator(data, 4, _is_verbatim_separator)
        return WindowsPrefix(WindowsPrefixKind.VERBATIM, data[:end])

    if data.startswith(b"\\\\.\\"):
        end = _find_separator(data, 4, _is_separator)
        return WindowsPrefix(WindowsPrefixKind.DEVICE_NS, data[:end])

    if data.startswith(b"\\\\"):
        server_end = _find_separator(data, 2, _is_separator)
        if server_end in (2, len(data)):
            return None
        share_end = _find_separator(data, server_end + 1, _is_separator)
        if share_end == server_end + 1:
            return None
        return WindowsPrefix(WindowsPrefixKind.UNC, data[:share_end])

    if _is_drive(data, 0):
        return WindowsPrefix(WindowsPrefixKind.DISK, data[:2])

    return None


@dataclass(frozen=True)
class WindowsComponent(Component):
    """One component of a Windows path; ``prefix`` is set for PREFIX components."""
    kind: ComponentKind
    raw: bytes
    prefix: Optional[WindowsPrefix] = None

    def as_bytes(self) -> bytes:
        return self.raw

    def is_prefix(self) -> bool:
        return self.kind is ComponentKind.PREFIX

    def is_root(self) -> bool:
        # A prefix anchors the path just like a root separator does
        return self.kind in (ComponentKind.ROOT_DIR, ComponentKind.PREFIX)

    def is_current(self) -> bool:
        return self.kind is ComponentKind.CUR_DIR

    def is_parent(self) -> bool:
        return self.kind is ComponentKind.PARENT_DIR

    def is_normal(self) -> bool:
        return self.kind is ComponentKind.NORMAL


class Utf8WindowsComponent(WindowsComponent):
    """WindowsComponent taken from a UTF-8 validated path."""

    def as_str(self) -> str:
        return self.raw.decode("utf-8")


class WindowsEncoding(Encoding):
    """
    Windows grammar.

    Both "\\" and "/" separate components, except after a verbatim
    (\\\\?\\) prefix where only "\\" does. "\\" is used when joining.
    """

    label = "windows"
    path_type = PathType.WINDOWS
    separator = SEPARATOR
    component_type = WindowsComponent

    def parse_prefix(self, data: bytes) -> Optional[WindowsPrefix]:
        return parse_prefix(data)

    def _body_start(self, data: bytes):
        """(prefix, offset after prefix, separator test for the rest)."""
        prefix = self.parse_prefix(data)
        if prefix is None:
            return None, 0, _is_separator
        is_sep = _is_verbatim_separator if prefix.is_verbatim() else _is_separator
        return prefix, len(prefix.raw), is_sep

    def parse(self, data: bytes) -> List[ParsedComponent]:
        parsed: List[ParsedComponent] = []
        prefix, start, is_sep = self._body_start(data)
        if prefix is not None:
            parsed.append((0, self.component_type(ComponentKind.PREFIX, prefix.raw, prefix)))
        has_root = start < len(data) and is_sep(data[start])
        if has_root:
            parsed.append((start, self.component(ComponentKind.ROOT_DIR, data[start:start + 1])))
            start += 1
        parsed.extend(parse_segments(self, data, start, has_root, is_sep))
        return parsed

    def has_root(self, data: bytes) -> bool:
        prefix, start, is_sep = self._body_start(data)
        if start < len(data) and is_sep(data[start]):
            return True
        return prefix is not None and prefix.has_implicit_root()

    def is_absolute(self, data: bytes) -> bool:
        return self.parse_prefix(data) is not None and self.has_root(data)

    def push(self, buf: bytearray, other: bytes) -> None:
        if self.parse_prefix(other) is not None:
            buf[:] = other
            return

        prefix, start, is_sep = self._body_start(bytes(buf))

        # Rooted but unprefixed: keep our prefix, replace everything after it
        if other and _is_separator(other[0]):
            del buf[start:]
            buf += other
            return

        at_bare_disk = (prefix is not None
                        and prefix.kind is WindowsPrefixKind.DISK
                        and len(buf) == start)
        if buf and not is_sep(buf[-1]) and not at_bare_disk:
            buf += SEPARATOR
        buf += other

    def to_std_str(self, data: bytes) -> str:
        if b"\x00" in data:
            raise ValueError("path contains an interior NUL byte")
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"path is not valid UTF-8: {e}") from e


class Utf8WindowsEncoding(WindowsEncoding):
    """Windows grammar over UTF-8 validated bytes."""

    label = "utf8-windows"
    utf8 = True
    component_type = Utf8WindowsComponent


class WindowsPath(Path):
    """Borrowed Windows path."""
    __slots__ = ()
    _encoding = WindowsEncoding()


class WindowsPathBuf(PathBuf):
    """Owned Windows path."""
    __slots__ = ()
    _encoding = WindowsEncoding()


class Utf8WindowsPath(Utf8PathMixin, Path):
    """Borrowed Windows path holding valid UTF-8."""
    __slots__ = ()
    _encoding = Utf8WindowsEncoding()


class Utf8WindowsPathBuf(Utf8PathMixin, PathBuf):
    """Owned Windows path holding valid UTF-8."""
    __slots__ = ()
    _encoding = Utf8WindowsEncoding()


bind_path_types(WindowsPath, WindowsPathBuf)
bind_path_types(Utf8WindowsPath, Utf8WindowsPathBuf)
