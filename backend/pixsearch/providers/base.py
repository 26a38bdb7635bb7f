"""Base image provider interface.

All image-search providers should inherit from BaseImageProvider and
implement ``search``. Providers never touch the event store.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

import structlog


DEFAULT_ALT_TEXT = "image"


@dataclass(frozen=True)
class ImageDescriptor:
    """Normalized image returned by every provider."""

    id: str
    thumbnail_url: str
    alt_text: str = DEFAULT_ALT_TEXT

    def __post_init__(self):
        """Validate data after initialization."""
        if not self.id:
            raise ValueError("id is required")
        if not self.thumbnail_url:
            raise ValueError("thumbnail_url is required")


class BaseImageProvider(ABC):
    """Abstract base class for external image-search providers."""

    provider_name: str = ""  # Must be overridden in subclass (e.g., "unsplash")

    def __init__(self):
        self.logger = structlog.get_logger(provider=self.provider_name)

    @abstractmethod
    async def search(self, term: str) -> List[ImageDescriptor]:
        """Fetch images matching ``term`` with a single outbound call.

        Args:
            term: Validated, trimmed search term

        Returns:
            At most one page of ImageDescriptor objects

        Raises:
            ProviderError: On timeout, network failure, rejected credentials,
                non-2xx status or a malformed body
        """
        pass
