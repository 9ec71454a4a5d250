"""Unit tests for the shopbind CLI."""

import json
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from shopbind.cli import cli
from shopbind.core.config import Settings
from shopbind.infrastructure.http.client import ShopClient


@pytest.fixture
def run_cli(settings, fake_api):
    """Invoke the CLI against the fake API."""

    def build_client(cli_settings):
        return ShopClient(settings=cli_settings, transport=httpx.MockTransport(fake_api.handler))

    def invoke(*args, **kwargs):
        runner = CliRunner()
        with patch("shopbind.cli.get_settings", return_value=settings), \
             patch("shopbind.cli.build_client", side_effect=build_client):
            return runner.invoke(cli, list(args), **kwargs)

    return invoke


def test_collections_list(run_cli, fake_api):
    fake_api.add(
        "GET",
        "/admin/custom_collections.json",
        json={"custom_collections": [{"id": 1, "title": "A", "template_suffix": None}]},
    )

    result = run_cli("collections", "list", "--limit", "5", "--ids", "1,2", "--published-status", "any")

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [{"id": 1, "title": "A"}]
    params = fake_api.last_request.url.params
    assert params["limit"] == "5"
    assert params["ids"] == "1,2"
    assert params["published_status"] == "any"


def test_collections_count(run_cli, fake_api):
    fake_api.add("GET", "/admin/custom_collections/count.json", json={"count": 4})

    result = run_cli("collections", "count")

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == 4


def test_collections_get(run_cli, fake_api):
    fake_api.add(
        "GET",
        "/admin/custom_collections/841564295.json",
        json={"custom_collection": {"id": 841564295, "title": "IPods", "sort_order": "manual"}},
    )

    result = run_cli("collections", "get", "841564295")

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"id": 841564295, "title": "IPods", "sort_order": "manual"}


def test_collections_get_not_found(run_cli):
    result = run_cli("collections", "get", "1")

    assert result.exit_code == 1
    assert "Error: 404: Not Found" in result.output


def test_collections_create(run_cli, fake_api):
    fake_api.add(
        "POST",
        "/admin/custom_collections.json",
        status_code=201,
        json={"custom_collection": {"id": 10, "title": "Summer"}},
    )

    result = run_cli(
        "collections", "create",
        "--title", "Summer",
        "--sort-order", "best-selling",
        "--image-src", "https://cdn.example.com/summer.png",
        "--published", "false",
    )

    assert result.exit_code == 0, result.output
    assert fake_api.last_json() == {
        "custom_collection": {
            "title": "Summer",
            "sort_order": "best-selling",
            "image": {"src": "https://cdn.example.com/summer.png"},
            "published": False,
        }
    }
    assert json.loads(result.output)["id"] == 10


def test_collections_update_sends_only_given_fields(run_cli, fake_api):
    fake_api.add(
        "PUT",
        "/admin/custom_collections/42.json",
        json={"custom_collection": {"id": 42, "title": "Renamed"}},
    )

    result = run_cli("collections", "update", "42", "--title", "Renamed")

    assert result.exit_code == 0, result.output
    assert fake_api.last_json() == {"custom_collection": {"id": 42, "title": "Renamed"}}


def test_collections_delete(run_cli, fake_api):
    fake_api.add("DELETE", "/admin/custom_collections/7.json", json={})

    result = run_cli("collections", "delete", "7", "--yes")

    assert result.exit_code == 0, result.output
    assert "Deleted custom collection 7." in result.output
    assert fake_api.last_request.method == "DELETE"


def test_collections_delete_aborts_without_confirmation(run_cli, fake_api):
    result = run_cli("collections", "delete", "7", input="n\n")

    assert result.exit_code == 1
    assert fake_api.requests == []


def test_metafields_list(run_cli, fake_api):
    fake_api.add(
        "GET",
        "/admin/collections/9/metafields.json",
        json={"metafields": [{"id": 1, "namespace": "custom", "key": "season", "value": "summer"}]},
    )

    result = run_cli("collections", "metafields", "list", "9", "--namespace", "custom")

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)[0]["key"] == "season"
    assert fake_api.last_request.url.params["namespace"] == "custom"


def test_metafields_create(run_cli, fake_api):
    fake_api.add(
        "POST",
        "/admin/collections/9/metafields.json",
        status_code=201,
        json={"metafield": {"id": 3, "namespace": "custom", "key": "season", "value": "summer"}},
    )

    result = run_cli(
        "collections", "metafields", "create", "9",
        "--namespace", "custom", "--key", "season", "--value", "summer",
    )

    assert result.exit_code == 0, result.output
    assert fake_api.last_json() == {
        "metafield": {
            "namespace": "custom",
            "key": "season",
            "value": "summer",
            "type": "single_line_text_field",
        }
    }


def test_metafields_delete(run_cli, fake_api):
    fake_api.add("DELETE", "/admin/collections/9/metafields/3.json", json={})

    result = run_cli("collections", "metafields", "delete", "9", "3")

    assert result.exit_code == 0, result.output
    assert "Deleted metafield 3." in result.output


def test_missing_shop_configuration():
    runner = CliRunner()
    with patch("shopbind.cli.get_settings", return_value=Settings(_env_file=None)):
        result = runner.invoke(cli, ["collections", "count"])

    assert result.exit_code == 1
    assert "No shop URL configured" in result.output


def test_info(settings):
    runner = CliRunner()
    with patch("shopbind.cli.get_settings", return_value=settings):
        result = runner.invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "https://test-shop.myshopify.com" in result.output
    assert "Token:        set" in result.output


def test_collections_list_rejects_non_integer_ids(run_cli, fake_api):
    result = run_cli("collections", "list", "--ids", "1,abc")

    assert result.exit_code == 2
    assert "expected comma-separated integers" in result.output
    assert fake_api.requests == []


def test_non_json_response_is_reported(run_cli, fake_api):
    fake_api.add("GET", "/admin/custom_collections.json", text="<html>maintenance</html>")

    result = run_cli("collections", "list")

    assert result.exit_code == 1
    assert "Error: Expecting value" in result.output


def test_metafields_update_sends_only_given_fields(run_cli, fake_api):
    fake_api.add(
        "PUT",
        "/admin/collections/9/metafields/3.json",
        json={"metafield": {"id": 3, "namespace": "custom", "key": "season", "value": "winter"}},
    )

    result = run_cli("collections", "metafields", "update", "9", "3", "--value", "winter")

    assert result.exit_code == 0, result.output
    assert fake_api.last_json() == {"metafield": {"id": 3, "value": "winter"}}
    assert json.loads(result.output)["value"] == "winter"
