"""Base classes and registry for generation services.

A generation service is the external collaborator that turns the uploaded
image(s) plus an instruction string into a stylized image. Each backend
(Gemini, the offline dry-run renderer, ...) has its own adapter that
implements a common interface, so the orchestrator never depends on a
particular SDK.

Service Contract
----------------
``generate`` receives the images in send order (primary first) and the
instruction text, and returns a :class:`GenerationResult`:

- ``image`` set: the service produced an image.
- ``image`` None: the service declined; ``text`` may carry its reason.

Adapters raise on transport or configuration problems. They never retry;
a retry is always a fresh user request.

Usage Example
-------------
    >>> from fadedmemory.core.services import service_registry
    >>> from fadedmemory.core.config import config
    >>> service = service_registry.instantiate("Gemini", config)
    >>> result = await service.generate(images, prompt)

See Also
--------
- GeminiService: Hosted Gemini image model
- DryRunService: Offline renderer for local development
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..config import FadedMemoryConfig
from ..images import ImageInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Raw outcome of a generation call.

    Attributes:
        image: Returned image bytes, or None when no image came back
        mime_type: MIME type reported by the service, if any
        text: Description or refusal text returned alongside (or instead of) the image
    """

    image: bytes | None = None
    mime_type: str | None = None
    text: str | None = None

    @property
    def has_image(self) -> bool:
        return bool(self.image)


class GenerationServiceBase(ABC):
    """Abstract base class for all generation services.

    Attributes
    ----------
    name : str
        Registry name of the service (e.g., "Gemini")
    description : str
        Brief description shown in logs
    config : FadedMemoryConfig
        Configuration object containing service settings
    """

    name: str = "base"
    description: str = ""

    def __init__(self, config: FadedMemoryConfig) -> None:
        self.config = config

    @abstractmethod
    async def generate(self, images: Sequence[ImageInput], instruction: str) -> GenerationResult:
        """Transform ``images`` according to ``instruction``.

        Args:
            images: One or two images, primary first
            instruction: Complete instruction text

        Returns:
            GenerationResult with the image and/or text the service returned
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class ServiceRegistry:
    """Registry for managing available generation services.

    Usage
    -----
        >>> service_registry.register(MyService)
        >>> service = service_registry.instantiate("My Service", config)
        >>> service_registry.list_available()
        ['Dry-Run', 'Gemini', 'My Service']
    """

    def __init__(self) -> None:
        self._services: dict[str, type[GenerationServiceBase]] = {}

    def register(self, service_class: type[GenerationServiceBase]) -> type[GenerationServiceBase]:
        """Register a generation service class.

        Returns the class unchanged so this can be used as a decorator.
        """
        service_name = service_class.name
        if service_name in self._services:
            logger.warning(f"Generation service '{service_name}' is already registered, overwriting")

        self._services[service_name] = service_class
        logger.debug(f"Registered generation service: {service_name}")
        return service_class

    def instantiate(self, service_name: str, config: FadedMemoryConfig) -> GenerationServiceBase:
        """Create an instance of a registered service.

        Raises
        ------
        ValueError
            If no service is registered under ``service_name``
        """
        service_class = self._services.get(service_name)
        if service_class is None:
            available = ", ".join(self.list_available())
            raise ValueError(
                f"Generation service '{service_name}' not found. Available: {available}"
            )

        logger.info(f"Instantiating generation service: {service_name}")
        return service_class(config)

    def get_service_class(self, service_name: str) -> type[GenerationServiceBase] | None:
        return self._services.get(service_name)

    def get_service_info(self, service_name: str) -> dict[str, Any] | None:
        """Return name and description for a registered service."""
        service_class = self._services.get(service_name)
        if service_class is None:
            return None
        return {"name": service_class.name, "description": service_class.description}

    def list_available(self) -> list[str]:
        return sorted(self._services)


# Global service registry instance
service_registry = ServiceRegistry()
