"""Output providers for replay animation formats."""

from pathlib import Path

from .base import OutputProvider
from .gif_provider import GifOutputProvider
from .webp_provider import WebPOutputProvider

_OUTPUT_PROVIDERS: dict[str, type[OutputProvider]] = {
    ".gif": GifOutputProvider,
    ".webp": WebPOutputProvider,
}


def resolve_output_provider(file_path: str) -> OutputProvider:
    """
    Resolve the appropriate output provider based on file extension.

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    provider_class = _OUTPUT_PROVIDERS.get(ext)
    if provider_class is None:
        supported = ", ".join(_OUTPUT_PROVIDERS)
        raise ValueError(f"Unsupported output format: {ext or file_path}. Supported formats: {supported}")
    return provider_class(file_path)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(ext.removeprefix(".") for ext in _OUTPUT_PROVIDERS)


__all__ = [
    "OutputProvider",
    "GifOutputProvider",
    "WebPOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
]
