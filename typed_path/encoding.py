"""
Path grammar interface.

Both engines (unix, windows) implement ``Encoding`` and ``Component`` so the
typed layer can forward to either one without caring which is active.
"""

import os
from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Tuple, Type

from .errors import InvalidUtf8Error
from .structures import ComponentKind, PathType, WindowsPrefix

__all__ = ["Component", "Encoding", "ParsedComponent"]


class Component(ABC):
    """
    Abstract interface for a single path component.

    Implementations: UnixComponent, WindowsComponent (and UTF-8 siblings)
    """

    kind: ComponentKind

    @abstractmethod
    def as_bytes(self) -> bytes:
        """Raw bytes of the component as they appear in the path."""
        ...

    @abstractmethod
    def is_root(self) -> bool:
        """True if nothing before this component can change its meaning."""
        ...

    @abstractmethod
    def is_current(self) -> bool:
        ...

    @abstractmethod
    def is_parent(self) -> bool:
        ...

    @abstractmethod
    def is_normal(self) -> bool:
        ...

    def __len__(self) -> int:
        return len(self.as_bytes())

    def is_empty(self) -> bool:
        return len(self) == 0

    def __bytes__(self) -> bytes:
        return self.as_bytes()


# (offset into the path, component)
ParsedComponent = Tuple[int, Component]


class Encoding(ABC):
    """
    Abstract interface for one path grammar.

    Implementations: UnixEncoding, WindowsEncoding, Utf8UnixEncoding,
    Utf8WindowsEncoding
    """

    label: ClassVar[str]
    path_type: ClassVar[PathType]
    separator: ClassVar[bytes]
    utf8: ClassVar[bool] = False
    component_type: ClassVar[Type[Component]]

    @abstractmethod
    def parse_prefix(self, data: bytes) -> Optional[WindowsPrefix]:
        """Return the leading prefix token, or None if the grammar has none."""
        ...

    @abstractmethod
    def parse(self, data: bytes) -> List[ParsedComponent]:
        """
        Split ``data`` into components, left to right.

        Each entry carries the byte offset at which the component starts so
        callers can slice the original bytes (e.g. for ``parent``).
        """
        ...

    @abstractmethod
    def has_root(self, data: bytes) -> bool:
        ...

    @abstractmethod
    def is_absolute(self, data: bytes) -> bool:
        ...

    @abstractmethod
    def push(self, buf: bytearray, other: bytes) -> None:
        """
        Extend ``buf`` in place with ``other``.

        An absolute ``other`` replaces the buffer; a relative one is
        appended after a separator.
        """
        ...

    @abstractmethod
    def to_std_str(self, data: bytes) -> str:
        """
        Decode ``data`` for the host path type.

        Raises:
            ValueError: content the host path type cannot hold
        """
        ...

    def from_std(self, path: "os.PathLike[str] | str") -> bytes:
        return self.validate(os.fsencode(path))

    def validate(self, data: bytes) -> bytes:
        """Check ``data`` against the text mode of this grammar."""
        if self.utf8:
            try:
                data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise InvalidUtf8Error(data, str(e)) from e
        return data

    def component(self, kind: ComponentKind, raw: bytes) -> Component:
        return self.component_type(kind, raw)  # type: ignore[call-arg]

    def is_native(self) -> bool:
        """True if this grammar is the one bound as native at import."""
        from . import native  # pylint: disable=import-outside-toplevel
        return self.path_type is native.NATIVE_PATH_TYPE

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
