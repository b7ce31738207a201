"""Storage backends."""

from .abstract_storage import AbstractStorage
from .local_storage import LocalStorage, build_timestamped_filename

__all__ = ["AbstractStorage", "LocalStorage", "build_timestamped_filename"]
