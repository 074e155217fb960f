"""
Printful integration modules.

Modules:
    api_client - REST client for the Printful API
"""

from .api_client import PrintfulAPIClient, PrintfulAPIError, PrintfulResponse

__all__ = [
    'PrintfulAPIClient',
    'PrintfulAPIError',
    'PrintfulResponse',
]
