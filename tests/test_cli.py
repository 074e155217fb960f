"""Tests for printful_sync/cli.py"""

from unittest.mock import MagicMock, patch

import pytest

from printful_sync.cli import main


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PRINTFUL_API_TOKEN", raising=False)
    monkeypatch.delenv("PRINTFUL_BASE_URL", raising=False)


@pytest.fixture
def client_factory(happy_client):
    """Stands in for the PrintfulAPIClient class used by the CLI."""
    factory = MagicMock()
    factory.return_value.__enter__.return_value = happy_client
    with patch("printful_sync.cli.PrintfulAPIClient", factory):
        yield factory


def test_missing_token_exits_before_network(client_factory, capsys):
    assert main([]) == 1
    client_factory.assert_not_called()
    assert "PRINTFUL_API_TOKEN not set" in capsys.readouterr().out


def test_happy_path(client_factory, artwork_dir, capsys):
    assert main(["--token", "tok", "--directory", str(artwork_dir)]) == 0

    client_factory.assert_called_once_with(
        access_token="tok", base_url="https://api.printful.com", timeout=30,
    )
    assert "Sync process completed!" in capsys.readouterr().out


def test_token_from_environment(client_factory, artwork_dir, monkeypatch):
    monkeypatch.setenv("PRINTFUL_API_TOKEN", "env-token")
    assert main(["--directory", str(artwork_dir)]) == 0
    assert client_factory.call_args.kwargs["access_token"] == "env-token"


def test_catalog_not_an_array_exits_1(client_factory, happy_client, artwork_dir, capsys, make_api_response):
    happy_client.list_catalog_products.return_value = make_api_response(200, {"data": None})
    assert main(["--token", "tok", "--directory", str(artwork_dir)]) == 1
    assert "Expected products to be an array" in capsys.readouterr().out


def test_no_image_files_exits_1(client_factory, happy_client, tmp_path):
    assert main(["--token", "tok", "--directory", str(tmp_path)]) == 1
    happy_client.upload_file.assert_not_called()


def test_rejected_sync_product_still_exits_0(
    client_factory, happy_client, artwork_dir, capsys, make_api_response
):
    happy_client.create_sync_product.return_value = make_api_response(
        400, {"code": 400, "result": "Invalid variant"},
    )
    assert main(["--token", "tok", "--directory", str(artwork_dir)]) == 0
    assert "Sync process completed!" in capsys.readouterr().out


def test_rejected_sync_product_strict_exits_1(
    client_factory, happy_client, artwork_dir, make_api_response
):
    happy_client.create_sync_product.return_value = make_api_response(
        400, {"code": 400, "result": "Invalid variant"},
    )
    assert main(["--token", "tok", "--directory", str(artwork_dir), "--strict"]) == 1


def test_cli_overrides_listing(client_factory, happy_client, artwork_dir):
    main([
        "--token", "tok", "--directory", str(artwork_dir),
        "--variant-id", "19314", "--retail-price", "34.99", "--external-id", "canvas-print-2",
    ])
    payload = happy_client.create_sync_product.call_args[0][0]
    assert payload["sync_product"]["external_id"] == "canvas-print-2"
    assert payload["sync_product"]["variants"][0]["variant_id"] == 19314
    assert payload["sync_product"]["variants"][0]["retail_price"] == "34.99"


def test_missing_config_file_exits_1(client_factory, tmp_path, capsys):
    assert main(["--token", "tok", "--config", str(tmp_path / "nope.yaml")]) == 1
    client_factory.assert_not_called()
    assert "Invalid sync settings" in capsys.readouterr().out


def test_empty_config_value_exits_1(client_factory, tmp_path, capsys):
    config = tmp_path / "listing.yaml"
    config.write_text("variant_id:\n", encoding="utf-8")

    assert main(["--token", "tok", "--config", str(config)]) == 1
    client_factory.assert_not_called()
    assert "variant_id must not be empty" in capsys.readouterr().out


@pytest.mark.parametrize("timeout", ["0", "-5", "nan", "soon"])
def test_invalid_timeout_is_usage_error(client_factory, artwork_dir, timeout, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--token", "tok", "--timeout", timeout, "--directory", str(artwork_dir)])

    assert exc_info.value.code == 2
    client_factory.assert_not_called()
    assert "--timeout" in capsys.readouterr().err


def test_custom_timeout_reaches_client(client_factory, artwork_dir):
    assert main(["--token", "tok", "--timeout", "2.5", "--directory", str(artwork_dir)]) == 0
    assert client_factory.call_args.kwargs["timeout"] == 2.5
