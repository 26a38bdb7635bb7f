"""Image provider adapters."""

from pixsearch.providers.base import BaseImageProvider, ImageDescriptor
from pixsearch.providers.unsplash import UnsplashImageProvider

__all__ = [
    "BaseImageProvider",
    "ImageDescriptor",
    "UnsplashImageProvider",
]
