"""Azure NetApp Files sample helpers."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("anf-sample")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
