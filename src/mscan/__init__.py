"""mscan: regex-level symbol scanner for MATLAB-style source files."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mscan")
except PackageNotFoundError:
    __version__ = "dev"
