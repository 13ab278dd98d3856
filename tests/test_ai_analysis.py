import json
from unittest.mock import MagicMock

import pytest
import requests

from ai_analysis import (
    DEFAULT_API_URL,
    DEFAULT_MODEL,
    REQUIRED_FIELDS,
    RESPONSE_SCHEMA,
    MalformedResponse,
    analyze_file_list,
    build_prompt,
    ensure_json,
    parse_analysis,
)
from models import FailureKind

FILES = "C:\\Users\\Student\\Downloads\\Physics_Notes_Final.pdf\nC:\\Users\\Student\\Downloads\\Screenshot_12.png"


@pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
def test_blank_input_sends_no_request(text, session, api_key):
    outcome = analyze_file_list(text, session=session)
    assert outcome.failure is FailureKind.EMPTY_INPUT
    session.post.assert_not_called()


def test_missing_key_is_configuration_failure(session, monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEYS", " , ")
    outcome = analyze_file_list(FILES, session=session)
    assert outcome.failure is FailureKind.CONFIGURATION
    assert not outcome.ok
    session.post.assert_not_called()


def test_success_parses_all_fields(session, api_key):
    outcome = analyze_file_list(FILES, session=session)
    assert outcome.ok
    result = outcome.result
    assert [c.name for c in result.categories] == ["PDFs"]
    assert result.categories[0].count == 10
    assert result.problems == ("Screenshots mixed with notes",)
    assert result.naming_examples[0].new == "2026-01-05_Physics_Notes_v1.pdf"
    assert result.powershell_script == 'Write-Host "Done"'


def test_request_carries_prompt_schema_and_key(session, api_key):
    analyze_file_list(FILES, session=session)
    args, kwargs = session.post.call_args
    assert args[0] == DEFAULT_API_URL
    payload = kwargs["json"]
    assert payload["model"] == DEFAULT_MODEL
    assert FILES in payload["messages"][-1]["content"]
    schema = payload["response_format"]["json_schema"]["schema"]
    assert schema is RESPONSE_SCHEMA
    assert schema["required"] == REQUIRED_FIELDS
    assert kwargs["headers"]["Authorization"].startswith("Bearer key-")
    assert kwargs["timeout"] > 0


def test_keys_rotate_per_request(session, api_key):
    analyze_file_list(FILES, session=session)
    analyze_file_list(FILES, session=session)
    used = [c.kwargs["headers"]["Authorization"] for c in session.post.call_args_list]
    assert sorted(used) == ["Bearer key-one", "Bearer key-two"]


def test_env_overrides_endpoint_and_model(session, api_key, monkeypatch):
    monkeypatch.setenv("DESKPLAN_API_URL", "http://localhost:9999/v1/chat/completions")
    monkeypatch.setenv("DESKPLAN_MODEL", "local/llama")
    monkeypatch.setenv("DESKPLAN_TIMEOUT", "5")
    analyze_file_list(FILES, session=session)
    args, kwargs = session.post.call_args
    assert args[0] == "http://localhost:9999/v1/chat/completions"
    assert kwargs["json"]["model"] == "local/llama"
    assert kwargs["timeout"] == 5.0


def test_network_error_is_reported_not_raised(api_key, caplog):
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("connection refused")
    with caplog.at_level("ERROR", logger="ai_analysis"):
        outcome = analyze_file_list(FILES, session=session)
    assert outcome.failure is FailureKind.NETWORK
    assert "connection refused" in outcome.message
    assert "AI analysis request failed" in caplog.text


def test_http_error_status_is_network_failure(api_key, completion):
    session = MagicMock()
    session.post.return_value = completion("{}", status=429)
    outcome = analyze_file_list(FILES, session=session)
    assert outcome.failure is FailureKind.NETWORK


def test_non_json_body_is_malformed(api_key):
    resp = MagicMock()
    resp.raise_for_status.return_value = None
    resp.json.side_effect = ValueError("Expecting value")
    session = MagicMock()
    session.post.return_value = resp
    outcome = analyze_file_list(FILES, session=session)
    assert outcome.failure is FailureKind.MALFORMED_RESPONSE


@pytest.mark.parametrize("body", [
    {"error": {"message": "rate limited"}},
    {"choices": []},
    {"choices": {"0": {"message": {"content": "{}"}}}},
    {"choices": ["plain string"]},
    {"choices": [{"message": "plain string"}]},
    {"choices": [{"message": {"content": None}}]},
    ["not", "an", "object"],
])
def test_unexpected_envelope_is_malformed(api_key, body):
    resp = MagicMock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = body
    session = MagicMock()
    session.post.return_value = resp
    outcome = analyze_file_list(FILES, session=session)
    assert outcome.failure is FailureKind.MALFORMED_RESPONSE


@pytest.mark.parametrize("content", ["", "not json at all", "{}", '{"categories": []}'])
def test_empty_or_partial_reply_is_rejected(content, api_key, completion):
    session = MagicMock()
    session.post.return_value = completion(content)
    outcome = analyze_file_list(FILES, session=session)
    assert outcome.failure is FailureKind.MALFORMED_RESPONSE
    assert outcome.result is None


def test_fenced_reply_is_accepted(reply_data):
    text = "Here is the plan:\n```json\n" + json.dumps(reply_data) + "\n```"
    result = parse_analysis(text)
    assert result.proposed_structure == reply_data["proposedStructure"]


def test_percentages_are_not_normalized(reply_data):
    reply_data["categories"] = [
        {"name": "PDFs", "count": 3, "percentage": 80},
        {"name": "Images", "count": 3, "percentage": 80},
    ]
    result = parse_analysis(json.dumps(reply_data))
    assert [c.percentage for c in result.categories] == [80, 80]


@pytest.mark.parametrize("field,value", [
    ("problems", "one problem"),
    ("proposedStructure", ["a", "b"]),
    ("categories", [{"name": "PDFs", "count": "ten", "percentage": 50}]),
    ("categories", [{"name": "PDFs", "count": True, "percentage": 50}]),
    ("namingExamples", [{"old": "a.pdf"}]),
])
def test_wrong_types_are_rejected(reply_data, field, value):
    reply_data[field] = value
    with pytest.raises(MalformedResponse):
        parse_analysis(json.dumps(reply_data))


def test_ensure_json_rejects_blank():
    with pytest.raises(MalformedResponse):
        ensure_json("   ")


def test_prompt_mentions_requirements():
    prompt = build_prompt("a.pdf")
    assert "a.pdf" in prompt
    assert "Write-Host" in prompt
    assert "New-Item -ItemType Directory -Force" in prompt
    assert "$HOME" in prompt


def test_result_round_trips_wire_names(reply_data):
    assert parse_analysis(json.dumps(reply_data)).to_dict() == reply_data


def test_legacy_text_choice_is_accepted(api_key, reply_data):
    resp = MagicMock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = {"choices": [{"text": json.dumps(reply_data)}]}
    session = MagicMock()
    session.post.return_value = resp
    assert analyze_file_list(FILES, session=session).ok


@pytest.mark.parametrize("timeout", ["abc", "", "30s"])
def test_bad_timeout_is_configuration_failure(session, api_key, monkeypatch, timeout):
    monkeypatch.setenv("DESKPLAN_TIMEOUT", timeout)
    outcome = analyze_file_list(FILES, session=session)
    assert outcome.failure is FailureKind.CONFIGURATION
    assert "DESKPLAN_TIMEOUT" in outcome.message
    session.post.assert_not_called()


def test_schema_error_names_the_offending_field(reply_data):
    reply_data["categories"] = [{"name": "PDFs", "count": 10, "percentage": "half"}]
    with pytest.raises(MalformedResponse, match="categories/0/percentage"):
        parse_analysis(json.dumps(reply_data))


def test_extra_fields_are_rejected(reply_data):
    reply_data["confidence"] = 0.9
    with pytest.raises(MalformedResponse):
        parse_analysis(json.dumps(reply_data))
