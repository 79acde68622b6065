"""Generation service adapters.

Importing this package registers the bundled services with
``service_registry``:

- **Gemini**: hosted Google Gemini image model (google-genai)
- **Dry-Run**: offline Pillow renderer for local development
"""

from .base import GenerationResult, GenerationServiceBase, ServiceRegistry, service_registry
from .dryrun import DryRunService
from .gemini import GeminiService

service_registry.register(GeminiService)
service_registry.register(DryRunService)

__all__ = [
    "DryRunService",
    "GeminiService",
    "GenerationResult",
    "GenerationServiceBase",
    "ServiceRegistry",
    "service_registry",
]
