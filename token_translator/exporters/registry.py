"""Factory for the built-in exporter registry."""

from .base import ExporterRegistry
from .css import CSSVariablesExporter
from .style_dictionary import StyleDictionaryExporter
from .tailwind import TailwindExporter
from .typescript import TypeScriptExporter
from .w3c_dtcg import W3CTokenExporter


def create_exporter_registry() -> ExporterRegistry:
    """Build a registry holding every built-in exporter."""
    registry = ExporterRegistry()
    registry.register(StyleDictionaryExporter())
    registry.register(W3CTokenExporter())
    registry.register(CSSVariablesExporter())
    registry.register(TailwindExporter())
    registry.register(TypeScriptExporter())
    return registry
