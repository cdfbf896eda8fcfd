"""Grammar-independent Path / PathBuf machinery shared by both engines."""

import pathlib
from typing import Callable, ClassVar, Iterator, List, Optional, Tuple, Union

from .encoding import Component, Encoding, ParsedComponent
from .errors import NativeConversionError
from .structures import ComponentKind, WindowsPrefix

# Anything a path can be built from
PathData = Union[bytes, bytearray, memoryview, str]


def to_bytes(data: PathData) -> bytes:
    """Coerce path input to bytes.

    ``str`` is UTF-8 encoded with ``surrogateescape`` so that strings from
    ``os.fsdecode`` give back their original bytes. Path-like values from
    this package are accepted through their ``as_bytes()``.

    Raises:
        ValueError: ``str`` holding a lone surrogate outside U+DC80..U+DCFF
    """
    if isinstance(data, str):
        try:
            return data.encode("utf-8", "surrogateescape")
        except UnicodeEncodeError as e:
            raise ValueError(f"path string cannot be encoded: {e}") from e
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    as_bytes = getattr(data, "as_bytes", None)
    if callable(as_bytes):
        return as_bytes()
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")


def parse_segments(encoding: Encoding, data: bytes, start: int, has_root: bool,
                   is_sep: Callable[[int], bool]) -> List[ParsedComponent]:
    """Split the body of a path (after any prefix and root) into components.

    A leading "." is kept as CUR_DIR only when the path has no root; every
    other "." and every empty segment is dropped.
    """
    parsed: List[ParsedComponent] = []
    pos = start
    end_of_data = len(data)
    while pos < end_of_data:
        end = pos
        while end < end_of_data and not is_sep(data[end]):
            end += 1
        segment = data[pos:end]
        if segment == b"..":
            parsed.append((pos, encoding.component(ComponentKind.PARENT_DIR, segment)))
        elif segment == b".":
            if pos == start and not has_root:
                parsed.append((pos, encoding.component(ComponentKind.CUR_DIR, segment)))
        elif segment:
            parsed.append((pos, encoding.component(ComponentKind.NORMAL, segment)))
        pos = end + 1
    return parsed


def split_file_at_dot(name: bytes) -> Tuple[bytes, Optional[bytes]]:
    """Split a file name into (stem, extension); dot-files have no extension."""
    if name == b"..":
        return name, None
    index = name.rfind(b".")
    if index <= 0:
        return name, None
    return name[:index], name[index + 1:]


class Components:
    """Restartable, left-to-right iterable over the components of one path."""

    __slots__ = ("_encoding", "_data")

    def __init__(self, encoding: Encoding, data: bytes):
        self._encoding = encoding
        self._data = data

    def __iter__(self) -> Iterator[Component]:
        for _, component in self._encoding.parse(self._data):
            yield component

    def __reversed__(self) -> Iterator[Component]:
        for _, component in reversed(self._encoding.parse(self._data)):
            yield component

    def prefix(self) -> Optional[WindowsPrefix]:
        return self._encoding.parse_prefix(self._data)

    def has_prefix(self) -> bool:
        return self.prefix() is not None

    def __repr__(self) -> str:
        return f"Components({list(self)!r})"


class PathOps:
    """Read-only operations shared by borrowed and owned paths of any grammar."""

    __slots__ = ()

    _encoding: ClassVar[Encoding]
    _borrowed: ClassVar[type]
    _owned: ClassVar[type]

    def as_bytes(self) -> bytes:
        raise NotImplementedError

    @property
    def encoding(self) -> Encoding:
        return self._encoding

    def to_string_lossy(self) -> str:
        return self.as_bytes().decode("utf-8", "replace")

    def components(self) -> Components:
        return Components(self._encoding, self.as_bytes())

    def has_root(self) -> bool:
        return self._encoding.has_root(self.as_bytes())

    def is_absolute(self) -> bool:
        return self._encoding.is_absolute(self.as_bytes())

    def is_relative(self) -> bool:
        return not self.is_absolute()

    def parent(self):
        """Path without its final component, or None for a root, prefix or empty path."""
        data = self.as_bytes()
        parsed = self._encoding.parse(data)
        if not parsed:
            return None
        last = parsed[-1][1]
        if not (last.is_normal() or last.is_current() or last.is_parent()):
            return None
        if len(parsed) == 1:
            return self._borrowed(b"")
        offset, previous = parsed[-2]
        return self._borrowed(data[:offset + len(previous)])

    def file_name(self) -> Optional[bytes]:
        last = next(reversed(self.components()), None)
        if last is None or not last.is_normal():
            return None
        return last.as_bytes()

    def file_stem(self) -> Optional[bytes]:
        name = self.file_name()
        return None if name is None else split_file_at_dot(name)[0]

    def extension(self) -> Optional[bytes]:
        name = self.file_name()
        return None if name is None else split_file_at_dot(name)[1]

    def starts_with(self, base: PathData) -> bool:
        """Component-wise prefix test (``/a/bc`` does not start with ``/a/b``)."""
        ours = self._key()
        theirs = self._borrowed(to_bytes(base))._key()
        return ours[:len(theirs)] == theirs

    def join(self, other: PathData):
        """Owned copy of this path with ``other`` pushed onto it."""
        buf = self._owned(self.as_bytes())
        buf.push(other)
        return buf

    def to_std_path(self) -> pathlib.Path:
        """Convert to the host ``pathlib.Path``.

        Raises:
            NativeConversionError: grammar is not native, or the bytes
                cannot be represented by the host path type
        """
        if not self._encoding.is_native():
            raise NativeConversionError(
                self, f"{self._encoding.label} paths are not native to this platform"
            )
        try:
            return pathlib.Path(self._encoding.to_std_str(self.as_bytes()))
        except ValueError as e:
            raise NativeConversionError(self, str(e)) from e

    def to_typed_path(self):
        """Tag with this grammar's variant; no classification runs."""
        from .typed import TypedPath, Utf8TypedPath  # pylint: disable=import-outside-toplevel
        typed_cls = Utf8TypedPath if self._encoding.utf8 else TypedPath
        return typed_cls.from_engine(self._borrowed(self.as_bytes()))

    def to_typed_path_buf(self):
        """Owned counterpart of ``to_typed_path``; copies the bytes."""
        from .typed import TypedPathBuf, Utf8TypedPathBuf  # pylint: disable=import-outside-toplevel
        typed_cls = Utf8TypedPathBuf if self._encoding.utf8 else TypedPathBuf
        return typed_cls.from_engine(self._owned(self.as_bytes()))

    def _key(self) -> tuple:
        # Root separators compare equal whichever byte spelled them
        return tuple(
            (c.kind, b"" if c.kind is ComponentKind.ROOT_DIR else c.as_bytes())
            for c in self.components()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathOps):
            return NotImplemented
        return (type(self._encoding) is type(other._encoding)
                and self._key() == other._key())

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_bytes()!r})"


class Path(PathOps):
    """Immutable path; the borrowed form."""

    __slots__ = ("_data",)

    def __init__(self, data: PathData = b""):
        self._data = self._encoding.validate(to_bytes(data))

    def as_bytes(self) -> bytes:
        return self._data

    def to_path_buf(self):
        return self._owned(self._data)

    def __hash__(self) -> int:
        return hash((type(self._encoding), self._key()))


class PathBuf(PathOps):
    """Growable path backed by a ``bytearray``; the owned form."""

    __slots__ = ("_buf",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: PathData = b""):
        self._buf = bytearray(self._encoding.validate(to_bytes(data)))

    @classmethod
    def from_bytearray(cls, buf: bytearray):
        """Adopt ``buf`` as the backing storage without copying it."""
        cls._encoding.validate(bytes(buf))
        path_buf = cls.__new__(cls)
        path_buf._buf = buf
        return path_buf

    @classmethod
    def from_std_path(cls, path):
        """Build from a host path; only valid when this grammar is native."""
        if not cls._encoding.is_native():
            raise NativeConversionError(
                path, f"{cls._encoding.label} paths are not native to this platform"
            )
        return cls.from_bytearray(bytearray(cls._encoding.from_std(path)))

    def to_std_path_buf(self) -> pathlib.Path:
        """Owned counterpart of ``from_std_path``; see ``to_std_path``."""
        return self.to_std_path()

    def as_bytes(self) -> bytes:
        return bytes(self._buf)

    def into_bytes(self) -> bytes:
        return bytes(self._buf)

    def as_path(self):
        return self._borrowed(bytes(self._buf))

    def push(self, other: PathData) -> None:
        self._encoding.push(self._buf, self._encoding.validate(to_bytes(other)))

    def pop(self) -> bool:
        """Truncate to ``parent()``; False if there was no parent."""
        parent = self.parent()
        if parent is None:
            return False
        del self._buf[len(parent.as_bytes()):]
        return True

    def set_file_name(self, name: PathData) -> None:
        if self.file_name() is not None:
            self.pop()
        self.push(name)

    def clear(self) -> None:
        self._buf.clear()

    def copy(self):
        return type(self).from_bytearray(bytearray(self._buf))

    __copy__ = copy


class Utf8PathMixin:
    """Text access for the UTF-8 validated path types."""

    __slots__ = ()

    def as_str(self) -> str:
        return self.as_bytes().decode("utf-8")  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return self.as_str()


def bind_path_types(borrowed: type, owned: type) -> None:
    """Let each half of a Path/PathBuf pair construct the other."""
    for cls in (borrowed, owned):
        cls._borrowed = borrowed
        cls._owned = owned
