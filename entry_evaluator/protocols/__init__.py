"""Protocol definitions for entry-evaluator adapters and host interfaces.

These protocols use typing.Protocol with @runtime_checkable so they work for
both static type checking and runtime isinstance() checks.
"""

from .asset_protocol import AssetProtocol
from .compiler_protocol import CompilerProtocol, DoneCallback
from .file_adapter_protocol import FileAdapterProtocol
from .template_adapter_protocol import TemplateAdapterProtocol, TemplateFunction


__all__ = [
    "AssetProtocol",
    "CompilerProtocol",
    "DoneCallback",
    "FileAdapterProtocol",
    "TemplateAdapterProtocol",
    "TemplateFunction",
]
