"""
Native path grammar.

The grammar of the running platform is bound once, at import, and exposed
as plain aliases: Windows hosts get the Windows types, every other host
gets the Unix types.

Usage: from typed_path.native import NativePathBuf
"""

import logging
import platform

from .structures import NativeBinding, PathType

__all__ = [
    "NATIVE_PATH_TYPE",
    "NativeComponent", "NativeEncoding", "NativePath", "NativePathBuf",
    "Utf8NativeComponent", "Utf8NativeEncoding", "Utf8NativePath", "Utf8NativePathBuf",
]

logger = logging.getLogger(__name__)


def _resolve_binding(system: str) -> NativeBinding:
    """Pick the native grammar for ``system`` (a ``platform.system()`` value)."""
    if system == "Windows":
        from . import windows  # pylint: disable=import-outside-toplevel
        return {
            "path_type": PathType.WINDOWS,
            "encoding": windows.WindowsEncoding,
            "path": windows.WindowsPath,
            "path_buf": windows.WindowsPathBuf,
            "component": windows.WindowsComponent,
            "utf8_encoding": windows.Utf8WindowsEncoding,
            "utf8_path": windows.Utf8WindowsPath,
            "utf8_path_buf": windows.Utf8WindowsPathBuf,
            "utf8_component": windows.Utf8WindowsComponent,
        }
    from . import unix  # pylint: disable=import-outside-toplevel
    return {
        "path_type": PathType.UNIX,
        "encoding": unix.UnixEncoding,
        "path": unix.UnixPath,
        "path_buf": unix.UnixPathBuf,
        "component": unix.UnixComponent,
        "utf8_encoding": unix.Utf8UnixEncoding,
        "utf8_path": unix.Utf8UnixPath,
        "utf8_path_buf": unix.Utf8UnixPathBuf,
        "utf8_component": unix.Utf8UnixComponent,
    }


# Resolved at import; never changes for the life of the process
_binding = _resolve_binding(platform.system())
logger.debug("Native path grammar: %s (platform %s)",
             _binding["path_type"].value, platform.system())

NATIVE_PATH_TYPE: PathType = _binding["path_type"]

NativeEncoding = _binding["encoding"]
NativePath = _binding["path"]
NativePathBuf = _binding["path_buf"]
NativeComponent = _binding["component"]

Utf8NativeEncoding = _binding["utf8_encoding"]
Utf8NativePath = _binding["utf8_path"]
Utf8NativePathBuf = _binding["utf8_path_buf"]
Utf8NativeComponent = _binding["utf8_component"]
