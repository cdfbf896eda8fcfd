"""
Typed paths: one value, either grammar.

``classify`` decides whether raw bytes are a Unix or a Windows path. The
typed wrappers record that decision as a tag once, at construction, and
forward every operation to the engine value they hold:

    TypedPath / TypedPathBuf / TypedComponent                  bytes
    Utf8TypedPath / Utf8TypedPathBuf / Utf8TypedComponent      UTF-8 text

Mutating a TypedPathBuf never re-runs classification.
"""

import pathlib
from typing import Callable, ClassVar, Iterator, Optional

from . import native
from .common import Components, PathData, to_bytes
from .encoding import Component
from .errors import VariantMismatchError
from .structures import ComponentKind, PathType
from .unix import (
    UnixComponent, UnixPath, UnixPathBuf,
    Utf8UnixComponent, Utf8UnixPath, Utf8UnixPathBuf,
)
from .windows import (
    Utf8WindowsComponent, Utf8WindowsPath, Utf8WindowsPathBuf,
    WindowsComponent, WindowsPath, WindowsPathBuf,
)

__all__ = [
    "classify",
    "TypedComponent", "TypedComponents", "TypedPath", "TypedPathBuf",
    "Utf8TypedComponent", "Utf8TypedPath", "Utf8TypedPathBuf",
]


def classify(data: PathData) -> PathType:
    """Decide which grammar ``data`` is written in.

    Windows if the Windows grammar finds a prefix (``C:``, ``\\\\server\\share``,
    ``\\\\.\\COM1``, ``\\\\?\\...``) or the first byte is a backslash; Unix
    otherwise, including for empty input. A leading "/" proves nothing since
    Windows accepts it too. Never fails for bytes input, nor for any str that
    ``os.fsdecode`` can produce; a str with any other lone surrogate raises
    ValueError before classification.

    Examples:
        C:\\some\\path      -> WINDOWS
        \\some\\path        -> WINDOWS
        /some/path         -> UNIX
        some\\path          -> UNIX
        (empty)            -> UNIX
    """
    raw = to_bytes(data)
    if WindowsPath(raw).components().has_prefix() or raw[:1] == b"\\":
        return PathType.WINDOWS
    return PathType.UNIX


class _Typed:
    """Tag handling shared by every typed wrapper."""

    __slots__ = ("_inner",)

    _unix_type: ClassVar[type]
    _windows_type: ClassVar[type]

    @classmethod
    def _engine_type(cls, path_type: PathType) -> type:
        if path_type is PathType.UNIX:
            return cls._unix_type
        if path_type is PathType.WINDOWS:
            return cls._windows_type
        raise ValueError(f"unknown path type: {path_type!r}")

    @classmethod
    def from_engine(cls, inner):
        """Wrap an engine value, tagging it with the grammar it already has."""
        if not isinstance(inner, (cls._unix_type, cls._windows_type)):
            raise TypeError(
                f"{cls.__name__} cannot hold {type(inner).__name__}"
            )
        typed = cls.__new__(cls)
        typed._inner = inner
        return typed

    @property
    def path_type(self) -> PathType:
        if isinstance(self._inner, self._unix_type):
            return PathType.UNIX
        if isinstance(self._inner, self._windows_type):
            return PathType.WINDOWS
        raise TypeError(f"unknown path variant: {type(self._inner).__name__}")

    @property
    def inner(self):
        """The wrapped engine value."""
        return self._inner

    def is_unix(self) -> bool:
        return self.path_type is PathType.UNIX

    def is_windows(self) -> bool:
        return self.path_type is PathType.WINDOWS

    def as_bytes(self) -> bytes:
        return self._inner.as_bytes()

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Typed):
            return NotImplemented
        return self._inner == other._inner

    def __hash__(self) -> int:
        return hash(self._inner)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class _Utf8Text:
    """``as_str`` for the UTF-8 typed family."""

    __slots__ = ()

    def as_str(self) -> str:
        return self._inner.as_str()  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return self.as_str()


class TypedComponent(_Typed):
    """A component yielded by ``TypedPath.components()``, tagged with its grammar.

    Every accessor forwards to the wrapped UnixComponent or WindowsComponent.
    """

    __slots__ = ()

    _unix_type = UnixComponent
    _windows_type = WindowsComponent
    _path_cls: ClassVar[type]

    @property
    def kind(self) -> ComponentKind:
        return self._inner.kind

    def is_root(self) -> bool:
        return self._inner.is_root()

    def is_current(self) -> bool:
        return self._inner.is_current()

    def is_parent(self) -> bool:
        return self._inner.is_parent()

    def is_normal(self) -> bool:
        return self._inner.is_normal()

    def __len__(self) -> int:
        return len(self._inner)

    def is_empty(self) -> bool:
        return self._inner.is_empty()

    def to_path(self):
        """Single-component path, classified from this component's own bytes.

        The parent path's tag is not consulted, so ``file.txt`` taken from
        ``C:\\dir\\file.txt`` comes back as a Unix path.
        """
        return self._path_cls(self.as_bytes())


class Utf8TypedComponent(_Utf8Text, TypedComponent):
    """TypedComponent over the UTF-8 component types."""

    __slots__ = ()

    _unix_type = Utf8UnixComponent
    _windows_type = Utf8WindowsComponent


class TypedComponents:
    """Restartable iterable of typed components, left to right."""

    __slots__ = ("_components", "_wrap")

    def __init__(self, components: Components, wrap: Callable[[Component], TypedComponent]):
        self._components = components
        self._wrap = wrap

    def __iter__(self) -> Iterator[TypedComponent]:
        for component in self._components:
            yield self._wrap(component)

    def __reversed__(self) -> Iterator[TypedComponent]:
        for component in reversed(self._components):
            yield self._wrap(component)

    def has_prefix(self) -> bool:
        return self._components.has_prefix()


class _TypedPathOps(_Typed):
    """Construction and read-only operations shared by borrowed and owned typed paths."""

    __slots__ = ()

    _component_cls: ClassVar[type]
    _borrowed_cls: ClassVar[type]
    _owned_cls: ClassVar[type]

    def __init__(self, data: PathData = b""):
        raw = to_bytes(data)
        self._inner = self._engine_type(classify(raw))(raw)

    @classmethod
    def new(cls, data: PathData = b""):
        return cls(data)

    @classmethod
    def unix(cls, path):
        """Tag ``path`` as Unix without classifying it."""
        if not isinstance(path, cls._unix_type):
            path = cls._unix_type(path)
        return cls.from_engine(path)

    @classmethod
    def windows(cls, path):
        """Tag ``path`` as Windows without classifying it."""
        if not isinstance(path, cls._windows_type):
            path = cls._windows_type(path)
        return cls.from_engine(path)

    def to_string_lossy(self) -> str:
        return self._inner.to_string_lossy()

    def components(self) -> TypedComponents:
        return TypedComponents(self._inner.components(), self._component_cls.from_engine)

    def has_root(self) -> bool:
        return self._inner.has_root()

    def is_absolute(self) -> bool:
        return self._inner.is_absolute()

    def is_relative(self) -> bool:
        return self._inner.is_relative()

    def file_name(self) -> Optional[bytes]:
        return self._inner.file_name()

    def file_stem(self) -> Optional[bytes]:
        return self._inner.file_stem()

    def extension(self) -> Optional[bytes]:
        return self._inner.extension()

    def starts_with(self, base: PathData) -> bool:
        """``base`` is read in this path's grammar."""
        return self._inner.starts_with(base)

    def parent(self):
        parent = self._inner.parent()
        return None if parent is None else self._borrowed_cls.from_engine(parent)

    def join(self, other: PathData):
        """Owned path with ``other`` pushed on; keeps this path's variant."""
        return self._owned_cls.from_engine(self._inner.join(other))

    def _engine_value(self):
        return self._inner

    def try_as_unix(self):
        """The Unix engine value, or None for a Windows path."""
        return self._engine_value() if self.is_unix() else None

    def try_as_windows(self):
        """The Windows engine value, or None for a Unix path."""
        return self._engine_value() if self.is_windows() else None

    def _narrow(self, expected: PathType):
        if self.path_type is expected:
            return self._engine_value()
        raise VariantMismatchError(self, expected)

    def to_std_path(self) -> pathlib.Path:
        """Convert to the host ``pathlib.Path``.

        Raises:
            VariantMismatchError: the variant is not the native grammar;
                ``err.path`` is this value, unchanged
            NativeConversionError: raised by the engine for content the host
                path type cannot hold; passed through as is
        """
        return self._narrow(native.NATIVE_PATH_TYPE).to_std_path()


class TypedPath(_TypedPathOps):
    """Immutable path that is exactly one of UnixPath or WindowsPath.

    ``TypedPath(data)`` classifies ``data``; ``TypedPath.unix(...)`` and
    ``TypedPath.windows(...)`` tag explicitly.
    """

    __slots__ = ()

    _unix_type = UnixPath
    _windows_type = WindowsPath

    def to_path_buf(self):
        return self._owned_cls.from_engine(self._inner.to_path_buf())


class TypedPathBuf(_TypedPathOps):
    """Growable path that is exactly one of UnixPathBuf or WindowsPathBuf.

    The variant chosen at construction is kept through every mutation.
    """

    __slots__ = ()

    __hash__ = None  # type: ignore[assignment]

    _unix_type = UnixPathBuf
    _windows_type = WindowsPathBuf

    @classmethod
    def from_bytearray(cls, buf: bytearray):
        """Classify ``buf`` and adopt it as storage without copying."""
        return cls.from_engine(cls._engine_type(classify(bytes(buf))).from_bytearray(buf))

    @classmethod
    def from_unix(cls, path):
        """Owned Unix-tagged copy of ``path``."""
        return cls.from_engine(cls._unix_type(path))

    @classmethod
    def from_windows(cls, path):
        """Owned Windows-tagged copy of ``path``."""
        return cls.from_engine(cls._windows_type(path))

    @classmethod
    def from_std_path(cls, path):
        """Build from a host path, tagged with the native variant."""
        return cls.from_engine(cls._engine_type(native.NATIVE_PATH_TYPE).from_std_path(path))

    def as_path(self):
        return self._borrowed_cls.from_engine(self._inner.as_path())

    def into_bytes(self) -> bytes:
        return self._inner.into_bytes()

    def _engine_value(self):
        # Narrowed buffers never share storage with this one
        return self._inner.copy()

    def push(self, other: PathData) -> None:
        self._inner.push(other)

    def pop(self) -> bool:
        return self._inner.pop()

    def set_file_name(self, name: PathData) -> None:
        self._inner.set_file_name(name)

    def clear(self) -> None:
        self._inner.clear()

    def copy(self):
        return self.from_engine(self._inner.copy())

    __copy__ = copy

    def into_unix_path_buf(self):
        """Independent copy of the Unix buffer held here.

        Raises:
            VariantMismatchError: this is a Windows path; ``err.path`` is self
        """
        return self._narrow(PathType.UNIX)

    def into_windows_path_buf(self):
        """Independent copy of the Windows buffer held here.

        Raises:
            VariantMismatchError: this is a Unix path; ``err.path`` is self
        """
        return self._narrow(PathType.WINDOWS)

    def into_std_path_buf(self) -> pathlib.Path:
        return self.to_std_path()

    def to_utf8(self):
        """UTF-8 typed copy with the same variant.

        Raises:
            InvalidUtf8Error: the bytes are not valid UTF-8
        """
        return Utf8TypedPathBuf.from_engine(
            Utf8TypedPathBuf._engine_type(self.path_type)(self.as_bytes())
        )


class Utf8TypedPath(_Utf8Text, TypedPath):
    """TypedPath over Utf8UnixPath / Utf8WindowsPath."""

    __slots__ = ()

    _unix_type = Utf8UnixPath
    _windows_type = Utf8WindowsPath


class Utf8TypedPathBuf(_Utf8Text, TypedPathBuf):
    """TypedPathBuf over Utf8UnixPathBuf / Utf8WindowsPathBuf.

    Construction from bytes raises InvalidUtf8Error for invalid UTF-8.
    """

    __slots__ = ()

    _unix_type = Utf8UnixPathBuf
    _windows_type = Utf8WindowsPathBuf

    @classmethod
    def from_bytes(cls, data: bytes):
        return cls(data)

    def to_bytes_path(self) -> TypedPathBuf:
        """Byte-typed copy with the same variant."""
        return TypedPathBuf.from_engine(
            TypedPathBuf._engine_type(self.path_type)(self.as_bytes())
        )

    def to_utf8(self):
        return self.copy()


def _bind_family(component_cls: type, borrowed_cls: type, owned_cls: type) -> None:
    component_cls._path_cls = borrowed_cls
    for cls in (borrowed_cls, owned_cls):
        cls._component_cls = component_cls
        cls._borrowed_cls = borrowed_cls
        cls._owned_cls = owned_cls


_bind_family(TypedComponent, TypedPath, TypedPathBuf)
_bind_family(Utf8TypedComponent, Utf8TypedPath, Utf8TypedPathBuf)
