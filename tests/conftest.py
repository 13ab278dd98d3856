import json
from unittest.mock import MagicMock

import pytest
import requests


@pytest.fixture
def reply_data():
    return {
        "categories": [{"name": "PDFs", "count": 10, "percentage": 50}],
        "problems": ["Screenshots mixed with notes"],
        "proposedStructure": "Documents\\01_Academic\\JEE_2027\\Physics",
        "namingExamples": [
            {"old": "Physics_Notes_Final.pdf", "new": "2026-01-05_Physics_Notes_v1.pdf"}
        ],
        "powershellScript": 'Write-Host "Done"',
    }


@pytest.fixture
def completion():
    """Builds a fake chat-completions HTTP response carrying `content`."""
    def _make(content, status=200):
        resp = MagicMock()
        resp.status_code = status
        resp.json.return_value = {"choices": [{"message": {"role": "assistant", "content": content}}]}
        if status >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
        else:
            resp.raise_for_status.return_value = None
        return resp
    return _make


@pytest.fixture
def session(completion, reply_data):
    fake = MagicMock()
    fake.post.return_value = completion(json.dumps(reply_data))
    return fake


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEYS", "key-one,key-two")
    monkeypatch.delenv("DESKPLAN_API_URL", raising=False)
    monkeypatch.delenv("DESKPLAN_MODEL", raising=False)
    monkeypatch.delenv("DESKPLAN_TIMEOUT", raising=False)
