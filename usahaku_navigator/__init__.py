"""UsahaKu Navigator Learning API"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("usahaku-navigator")
except PackageNotFoundError:
    __version__ = "dev"
