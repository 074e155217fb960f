"""Shared test fixtures."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from printful_sync.common.config_loader import SyncSettings
from printful_sync.printful.api_client import PrintfulAPIClient, PrintfulResponse


def api_response(status_code=200, data=None, text=None):
    """Build a PrintfulResponse as returned by PrintfulAPIClient.rest_request."""
    if text is None:
        return PrintfulResponse(
            status_code=status_code,
            text=json.dumps(data),
            data=data,
            is_json=True,
        )
    return PrintfulResponse(status_code=status_code, text=text)


def http_response(status_code=200, json_data=None, text=None):
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if json_data is None and text is not None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text
    else:
        response.json.return_value = json_data
        response.text = text if text is not None else json.dumps(json_data)
    return response


@pytest.fixture
def make_api_response():
    return api_response


@pytest.fixture
def make_http_response():
    return http_response


@pytest.fixture
def settings():
    return SyncSettings()


@pytest.fixture
def catalog_products():
    """Raw /v2/catalog-products entries."""
    return [
        {"id": 71, "type": "T-SHIRT", "name": "Unisex Staple T-Shirt | Bella + Canvas 3001",
         "brand": "Bella + Canvas", "model": "3001", "variant_count": 2},
        {"id": 12, "type": "T-SHIRT", "name": "Unisex Basic Softstyle T-Shirt | Gildan 64000",
         "brand": "Gildan", "model": "64000", "variant_count": 2},
        {"id": 3, "type": "CANVAS", "name": "Canvas (in)",
         "brand": None, "model": None, "variant_count": 2},
        {"id": 1, "type": "POSTER", "name": "Enhanced Matte Paper Poster (in)",
         "brand": None, "model": None, "variant_count": 1},
    ]


@pytest.fixture
def canvas_variants():
    """Raw /v2/catalog-products/3/catalog-variants entries."""
    return [
        {"id": 823, "catalog_product_id": 3, "name": "Canvas (in) (12″×12″)"},
        {"id": 19313, "catalog_product_id": 3, "name": "Canvas (in) (24″×24″)"},
    ]


@pytest.fixture
def artwork_dir(tmp_path):
    """Directory containing one PNG and a non-image file."""
    (tmp_path / "artwork.png").write_bytes(b"\x89PNG\r\n\x1a\nfake")
    (tmp_path / "notes.txt").write_text("not an image")
    return tmp_path


@pytest.fixture
def mock_client():
    """Printful client double; tests configure return values per endpoint."""
    return MagicMock(spec=PrintfulAPIClient)


@pytest.fixture
def happy_client(mock_client, catalog_products, canvas_variants):
    """Client whose every endpoint succeeds."""
    mock_client.list_catalog_products.return_value = api_response(
        200, {"data": catalog_products, "paging": {"total": 4, "offset": 0, "limit": 20}},
    )
    mock_client.list_catalog_variants.return_value = api_response(200, {"data": canvas_variants})
    mock_client.list_stores.return_value = api_response(
        200, {"code": 200, "result": [{"id": 14709021, "name": "My Store", "type": "native"}]},
    )
    mock_client.upload_file.return_value = api_response(
        200, {"code": 200, "result": {"id": 1, "url": "http://x/y.png", "status": "waiting"}},
    )
    mock_client.create_sync_product.return_value = api_response(
        200, {"code": 200, "result": {"id": 555, "external_id": "canvas-print-1"}},
    )
    return mock_client

@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() calls made by CLI tests."""
    yield
    logger = logging.getLogger("printful_sync")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
