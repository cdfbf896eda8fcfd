"""
typed-path: Unix and Windows paths as bytes, on any host.

Usage:
    from typed_path import TypedPath

    path = TypedPath(b"C:\\\\Users\\\\me\\\\file.txt")
    path.is_windows()  # True
"""

from .encoding import Component, Encoding
from .errors import InvalidUtf8Error, NativeConversionError, TypedPathError, VariantMismatchError
from .native import (
    NATIVE_PATH_TYPE,
    NativeComponent, NativeEncoding, NativePath, NativePathBuf,
    Utf8NativeComponent, Utf8NativeEncoding, Utf8NativePath, Utf8NativePathBuf,
)
from .structures import ComponentKind, PathType, WindowsPrefix, WindowsPrefixKind
from .typed import (
    TypedComponent, TypedComponents, TypedPath, TypedPathBuf,
    Utf8TypedComponent, Utf8TypedPath, Utf8TypedPathBuf,
    classify,
)
from .unix import (
    UnixComponent, UnixEncoding, UnixPath, UnixPathBuf,
    Utf8UnixComponent, Utf8UnixEncoding, Utf8UnixPath, Utf8UnixPathBuf,
)
from .windows import (
    Utf8WindowsComponent, Utf8WindowsEncoding, Utf8WindowsPath, Utf8WindowsPathBuf,
    WindowsComponent, WindowsEncoding, WindowsPath, WindowsPathBuf,
)

__all__ = [
    "classify",
    "Component", "ComponentKind", "Encoding", "PathType", "WindowsPrefix", "WindowsPrefixKind",
    "InvalidUtf8Error", "NativeConversionError", "TypedPathError", "VariantMismatchError",
    "NATIVE_PATH_TYPE",
    "NativeComponent", "NativeEncoding", "NativePath", "NativePathBuf",
    "Utf8NativeComponent", "Utf8NativeEncoding", "Utf8NativePath", "Utf8NativePathBuf",
    "TypedComponent", "TypedComponents", "TypedPath", "TypedPathBuf",
    "Utf8TypedComponent", "Utf8TypedPath", "Utf8TypedPathBuf",
    "UnixComponent", "UnixEncoding", "UnixPath", "UnixPathBuf",
    "Utf8UnixComponent", "Utf8UnixEncoding", "Utf8UnixPath", "Utf8UnixPathBuf",
    "Utf8WindowsComponent", "Utf8WindowsEncoding", "Utf8WindowsPath", "Utf8WindowsPathBuf",
    "WindowsComponent", "WindowsEncoding", "WindowsPath", "WindowsPathBuf",
]
