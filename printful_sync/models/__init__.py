"""
Data models for the Printful sync workflow.

This module contains pure data classes with no business logic.
"""

from .catalog import (
    CatalogProduct,
    CatalogVariant,
    SyncProductRequest,
    SyncVariant,
    UploadedFile,
)
from .result import StepResult

__all__ = [
    'CatalogProduct',
    'CatalogVariant',
    'UploadedFile',
    'SyncVariant',
    'SyncProductRequest',
    'StepResult',
]
