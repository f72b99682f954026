"""Adapters package for external system interfaces."""

from entry_evaluator.protocols import FileAdapterProtocol, TemplateAdapterProtocol

from .file_adapter import FileSystemAdapter, create_file_adapter
from .template_adapter import JinjaTemplateAdapter, create_template_adapter


__all__ = [
    "FileAdapterProtocol",
    "FileSystemAdapter",
    "create_file_adapter",
    "TemplateAdapterProtocol",
    "JinjaTemplateAdapter",
    "create_template_adapter",
]
