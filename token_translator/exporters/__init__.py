"""Exporters for the supported target notations.

- Style Dictionary (style_dictionary.py)
- W3C DTCG (w3c_dtcg.py)
- CSS custom properties (css.py)
- Tailwind theme (tailwind.py)
- TypeScript theme (typescript.py)

``export_tokens`` in service.py runs the requested exporters and adds a
README manifest (manifest.py).
"""

from .base import (
    ExportFailure,
    ExportOptions,
    ExporterRegistry,
    ExportResult,
    TokenExporter,
    VirtualFile,
)
from .css import CSSVariablesExporter, token_name_to_css_var
from .manifest import build_manifest
from .registry import create_exporter_registry
from .service import export_tokens, generate_preview, resolve_references
from .style_dictionary import StyleDictionaryExporter
from .tailwind import TailwindExporter
from .typescript import TypeScriptExporter
from .w3c_dtcg import W3CTokenExporter

__all__ = [
    "ExportFailure",
    "ExportOptions",
    "ExporterRegistry",
    "ExportResult",
    "TokenExporter",
    "VirtualFile",
    "build_manifest",
    "create_exporter_registry",
    "export_tokens",
    "generate_preview",
    "resolve_references",
    "token_name_to_css_var",
    "CSSVariablesExporter",
    "StyleDictionaryExporter",
    "TailwindExporter",
    "TypeScriptExporter",
    "W3CTokenExporter",
]
