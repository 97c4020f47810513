"""webfwk: validation kernel for a small web-application framework."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("webfwk")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
