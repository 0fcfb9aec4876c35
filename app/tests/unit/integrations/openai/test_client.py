"""Tests for the chat-completions client."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from infrastructure.i18n import Language
from infrastructure.operations import OperationStatus
from integrations.openai import MineralSuggestion, OpenAIClient
from integrations.openai.schemas import TRANSLATION_FIELDS

SUGGESTION = {
    "common_name": "Hematite",
    "description": "Iron oxide.",
    "mineral_family": "Oxide",
    "formula": "Fe2O3",
    "hardness_mohs": 5.5,
    "density_g_cm3": 5.26,
    "crystal_system": "Trigonal",
    "color": "Steel grey",
    "streak": "Red",
    "luster": "Metallic",
    "major_elements": [{"element": "Fe", "percent": 69.94}],
    "notes": "",
}


def _completion(content):
    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = {"choices": [{"message": {"content": content}}]}
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return OpenAIClient(api_key="sk-test", model="test-model", session=session)


def test_unconfigured_client_does_not_call_network(session):
    client = OpenAIClient(api_key="", session=session)
    assert not client.is_configured
    result = client.suggest_mineral(b"png", "image/png")
    assert result.status == OperationStatus.UNAUTHORIZED
    assert result.error_code == "NOT_CONFIGURED"
    session.post.assert_not_called()


def test_suggest_mineral_success(client, session):
    session.post.return_value = _completion(json.dumps(SUGGESTION))
    result = client.suggest_mineral(b"\x89PNG", "image/png", "found in a quarry")
    assert result.is_success
    assert isinstance(result.data, MineralSuggestion)
    assert result.data.common_name == "Hematite"

    _, kwargs = session.post.call_args
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["timeout"] == 20.0
    payload = kwargs["json"]
    assert payload["model"] == "test-model"
    assert payload["response_format"]["json_schema"]["strict"] is True
    image_part = payload["messages"][1]["content"][1]
    assert image_part["image_url"]["url"].startswith("data:image/png;base64,")
    assert "found in a quarry" in payload["messages"][1]["content"][0]["text"]


def test_suggestion_schema_mismatch(client, session):
    session.post.return_value = _completion(json.dumps({"common_name": "x"}))
    result = client.suggest_mineral(b"png", "image/png")
    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "SCHEMA_MISMATCH"


def test_translate_metadata_success(client, session):
    translated = {field: f"fr {field}" for field in TRANSLATION_FIELDS}
    session.post.return_value = _completion(json.dumps(translated))
    fields = {field: field for field in TRANSLATION_FIELDS}
    result = client.translate_metadata(fields, Language.FR)
    assert result.is_success
    assert result.data == translated

    payload = session.post.call_args.kwargs["json"]
    assert payload["response_format"]["json_schema"]["name"] == "mineral_translation_fr"
    assert "French" in payload["messages"][1]["content"][0]["text"]


def test_response_without_choices(client, session):
    response = _completion("")
    response.json.return_value = {"choices": []}
    session.post.return_value = response
    result = client.translate_metadata({}, Language.DE)
    assert result.error_code == "INVALID_RESPONSE"


@pytest.mark.parametrize(
    "choices",
    [["not a dict"], [{"message": "plain text"}], [{"message": {"content": None}}], {"0": {}}],
)
def test_malformed_choices(client, session, choices):
    response = _completion("")
    response.json.return_value = {"choices": choices}
    session.post.return_value = response
    result = client.suggest_mineral(b"png", "image/png")
    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "INVALID_RESPONSE"


def test_response_body_not_json(client, session):
    response = _completion("")
    response.json.side_effect = ValueError("no json")
    session.post.return_value = response
    result = client.translate_metadata({}, Language.DE)
    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "INVALID_RESPONSE"


def test_content_not_json(client, session):
    session.post.return_value = _completion("not json at all")
    result = client.translate_metadata({}, Language.DE)
    assert result.error_code == "SCHEMA_MISMATCH"


def test_timeout_is_transient(client, session):
    session.post.side_effect = requests.Timeout("read timed out")
    result = client.translate_metadata({}, Language.JA)
    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "TIMEOUT"


def test_server_error_is_transient(client, session):
    response = MagicMock()
    response.status_code = 500
    response.text = "boom"
    response.headers = {}
    failing = MagicMock()
    failing.raise_for_status.side_effect = requests.HTTPError(response=response)
    session.post.return_value = failing
    result = client.suggest_mineral(b"png", "image/png")
    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "SERVER_ERROR"
