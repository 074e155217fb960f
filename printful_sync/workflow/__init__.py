"""
Sync workflow.

Modules:
    image_scanner - Find local artwork files
    sync_pipeline - Ordered catalog → upload → sync product steps
"""

from .image_scanner import content_type_for, find_image_files
from .sync_pipeline import SyncOutcome, SyncPipeline

__all__ = [
    'find_image_files',
    'content_type_for',
    'SyncPipeline',
    'SyncOutcome',
]
