import re
from datetime import date

from models import NamingInput

_WHITESPACE = re.compile(r"\s+")


def default_naming_input() -> NamingInput:
    return NamingInput(date=date.today().isoformat())


def build_example_filename(inputs: NamingInput, extension: str = "pdf") -> str:
    # ISO date + subject + topic + version
    subject = _WHITESPACE.sub("_", inputs.subject)
    topic = _WHITESPACE.sub("_", inputs.topic)
    return f"{inputs.date}_{subject}_{topic}_{inputs.version}.{extension}"
