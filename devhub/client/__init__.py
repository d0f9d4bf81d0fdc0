"""Remote resource client and its configuration."""

from .config import ClientConfig
from .http import ResourceClient

__all__ = ["ClientConfig", "ResourceClient"]
