"""Typical-building generation delegate."""

from .generator import GeneratorError, ModelGenerator, OpenStudioStandardsGenerator

__all__ = [
    "GeneratorError",
    "ModelGenerator",
    "OpenStudioStandardsGenerator",
]
