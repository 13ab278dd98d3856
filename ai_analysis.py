import os
import json
import logging
from itertools import cycle
from typing import Any, Dict, Iterator, Optional

import jsonschema
import requests
from dotenv import load_dotenv

from models import AnalysisOutcome, AnalysisResult, FailureKind

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_API_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "google/gemini-2.5-flash"
DEFAULT_TIMEOUT = 60

SYSTEM_PROMPT = "You are a Windows 10 file organization expert. Reply with JSON only."

REQUIRED_FIELDS = ["categories", "problems", "proposedStructure", "namingExamples", "powershellScript"]

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "categories": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "count": {"type": "number"},
                    "percentage": {"type": "number"},
                },
                "required": ["name", "count", "percentage"],
                "additionalProperties": False,
            },
        },
        "problems": {"type": "array", "items": {"type": "string"}},
        "proposedStructure": {"type": "string"},
        "namingExamples": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "old": {"type": "string"},
                    "new": {"type": "string"},
                },
                "required": ["old", "new"],
                "additionalProperties": False,
            },
        },
        "powershellScript": {"type": "string"},
    },
    "required": REQUIRED_FIELDS,
    "additionalProperties": False,
}


class MalformedResponse(ValueError):
    """Reply text that is not JSON or does not match RESPONSE_SCHEMA."""


_key_cycle: Optional[Iterator[str]] = None
_key_source: Optional[str] = None


def _next_api_key() -> Optional[str]:
    """
    Rotate through OPENROUTER_API_KEYS, one key per request.
    The pool is rebuilt whenever the environment value changes.
    """
    global _key_cycle, _key_source
    raw = os.getenv("OPENROUTER_API_KEYS", "")
    if raw != _key_source:
        keys = [k.strip() for k in raw.split(",") if k.strip()]
        _key_cycle = cycle(keys) if keys else None
        _key_source = raw
    return next(_key_cycle) if _key_cycle else None


def build_prompt(file_list: str) -> str:
    return (
        "Act as a Windows 10 expert. Analyze this list of files.\n"
        "Context: The user is a student preparing for JEE 2027.\n"
        "Files:\n"
        f"{file_list}\n\n"
        "Generate a JSON response that categorizes these files and provides a ROBUST PowerShell script.\n"
        "The PowerShell script MUST:\n"
        "1. Use 'Write-Host' to inform the user what it is doing (e.g., 'Creating folder X', 'Moving file Y').\n"
        "2. Create directories using New-Item -ItemType Directory -Force.\n"
        "3. Use absolute paths where possible starting from $HOME.\n"
        "4. Include a final success message."
    )


def build_payload(file_list: str, model: str) -> Dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_prompt(file_list)},
        ],
        "response_format": {
            "type": "json_schema",
            "json_schema": {"name": "file_analysis", "strict": True, "schema": RESPONSE_SCHEMA},
        },
    }


def ensure_json(text: str) -> Any:
    text = text.strip()
    if not text:
        raise MalformedResponse("Empty response cannot be parsed")
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        # tolerate prose or code fences around a single object
        start = text.find("{")
        end = text.rfind("}")
        if start != -1 and end > start:
            try:
                return json.loads(text[start : end + 1])
            except json.JSONDecodeError as exc:
                raise MalformedResponse(f"Invalid JSON in response: {exc}") from exc
        raise MalformedResponse("Response does not contain a JSON object")


def validate_analysis(data: Any) -> None:
    """
    Reject partial replies: every required field present and correctly typed.
    Percentages are taken as-is; they are not required to sum to 100.
    """
    try:
        jsonschema.validate(instance=data, schema=RESPONSE_SCHEMA)
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "response"
        raise MalformedResponse(f"{where}: {e.message}") from e


def parse_analysis(text: str) -> AnalysisResult:
    data = ensure_json(text)
    validate_analysis(data)
    return AnalysisResult.from_dict(data)


def _completion_text(data: Any) -> str:
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        raise MalformedResponse(f"Unexpected API response: {str(data)[:200]}")
    choice = choices[0]
    if not isinstance(choice, dict):
        raise MalformedResponse(f"Unexpected completion choice: {str(choice)[:200]}")
    msg = choice.get("message")
    if isinstance(msg, dict) and isinstance(msg.get("content"), str):
        return msg["content"].strip()
    if isinstance(choice.get("text"), str):
        return choice["text"].strip()
    raise MalformedResponse(f"Completion choice has no text: {str(choice)[:200]}")


def analyze_file_list(file_list: str, session=requests) -> AnalysisOutcome:
    """
    Send the pasted file list to the completion API and parse the structured plan.
    Never raises for an expected failure; the outcome carries the failure kind instead.
    """
    if not file_list.strip():
        return AnalysisOutcome.failed(FailureKind.EMPTY_INPUT, "Paste a file list first.")

    key = _next_api_key()
    if not key:
        logger.error("No API key configured; set OPENROUTER_API_KEYS")
        return AnalysisOutcome.failed(
            FailureKind.CONFIGURATION,
            "No API key found. Set the OPENROUTER_API_KEYS env var.",
        )

    url = os.getenv("DESKPLAN_API_URL", DEFAULT_API_URL)
    model = os.getenv("DESKPLAN_MODEL", DEFAULT_MODEL)
    raw_timeout = os.getenv("DESKPLAN_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        logger.error("Invalid DESKPLAN_TIMEOUT: %r", raw_timeout)
        return AnalysisOutcome.failed(
            FailureKind.CONFIGURATION,
            f"DESKPLAN_TIMEOUT must be a number of seconds, got {raw_timeout!r}.",
        )
    headers = {"Authorization": f"Bearer {key}", "Content-Type": "application/json"}
    payload = build_payload(file_list, model)

    lines = len(file_list.strip().splitlines())
    logger.info("Requesting analysis of %d file entries from %s", lines, model)
    try:
        resp = session.post(url, headers=headers, json=payload, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.error("AI analysis request failed: %s", e)
        return AnalysisOutcome.failed(FailureKind.NETWORK, f"API error: {e}")

    try:
        data = resp.json()
    except ValueError as e:
        logger.error("AI analysis returned a non-JSON body: %s", e)
        return AnalysisOutcome.failed(FailureKind.MALFORMED_RESPONSE, f"Unreadable API response: {e}")

    try:
        result = parse_analysis(_completion_text(data))
    except MalformedResponse as e:
        logger.warning("AI analysis reply rejected: %s", e)
        return AnalysisOutcome.failed(FailureKind.MALFORMED_RESPONSE, str(e))

    logger.info("AI analysis returned %d categories", len(result.categories))
    return AnalysisOutcome.success(result)

