"""
Prompt serialization module.

Converts built prompts to and from JSON. Supports validation of the
dictionary layout before a Prompt is reconstructed.
"""

import json
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional

from .prompt import Prompt
from .sections import SECTION_TYPES


class PromptFormatError(Exception):
    """Raised when prompt data cannot be parsed or validated."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.line = line
        self.column = column

        if line is not None and column is not None:
            full_message = f"{message} (line {line}, column {column})"
        elif line is not None:
            full_message = f"{message} (line {line})"
        else:
            full_message = message

        super().__init__(full_message)


def _payload_fields(kind: str) -> list[str]:
    """Names of the payload fields of a section kind."""
    return [f.name for f in fields(SECTION_TYPES[kind])]


def validate_prompt_data(data: Any) -> tuple[bool, list[str]]:
    """Validate a prompt dictionary.

    Checks that:
    - the version field is present and a string
    - sections is a list of objects
    - each section has a known kind and string payload fields only

    Args:
        data: Dictionary to validate.

    Returns:
        A tuple of (is_valid, errors) where errors is empty when valid.

    Example:
        is_valid, errors = validate_prompt_data({
            "version": "1.0",
            "sections": [{"kind": "goal", "text": "Assess credit risk"}],
        })
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        return False, ["Prompt data must be a dictionary"]

    if "version" not in data:
        errors.append("Missing required field: 'version'")
    elif not isinstance(data["version"], str):
        errors.append("Field 'version' must be a string")

    sections = data.get("sections", [])
    if not isinstance(sections, list):
        errors.append("Field 'sections' must be an array")
        return False, errors

    for i, section in enumerate(sections):
        if not isinstance(section, dict):
            errors.append(f"Section {i} must be an object")
            continue

        kind = section.get("kind")
        if kind not in SECTION_TYPES:
            errors.append(f"Section {i} has unknown kind {kind!r}")
            continue

        expected = _payload_fields(kind)
        for name in expected:
            if name not in section:
                errors.append(f"Section {i} ({kind}) is missing field '{name}'")
            elif not isinstance(section[name], str):
                errors.append(f"Section {i} ({kind}) field '{name}' must be a string")

        unknown = set(section) - set(expected) - {"kind"}
        if unknown:
            errors.append(
                f"Section {i} ({kind}) has unknown fields: {', '.join(sorted(unknown))}"
            )

    return len(errors) == 0, errors


def prompt_from_dict(data: dict[str, Any]) -> Prompt:
    """Create a Prompt from a validated dictionary.

    Raises:
        PromptFormatError: If validation fails.
    """
    is_valid, errors = validate_prompt_data(data)
    if not is_valid:
        raise PromptFormatError(f"Prompt validation failed: {'; '.join(errors)}")

    sections = []
    for item in data.get("sections", []):
        section_type = SECTION_TYPES[item["kind"]]
        payload = {name: item[name] for name in _payload_fields(item["kind"])}
        sections.append(section_type(**payload))

    return Prompt(tuple(sections))


def export_prompt(prompt: Prompt) -> str:
    """Serialize a Prompt to a JSON string.

    Example:
        json_str = export_prompt(PromptBuilder().goal("Assess").build())
    """
    return json.dumps(prompt.to_dict(), indent=2, ensure_ascii=False)


def import_prompt(json_str: str) -> Prompt:
    """Deserialize a Prompt from a JSON string.

    Raises:
        PromptFormatError: If the JSON is malformed or validation fails.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise PromptFormatError(
            f"Invalid JSON: {e.msg}",
            line=e.lineno,
            column=e.colno,
        )

    return prompt_from_dict(data)



def load_prompt_file(path: Path) -> Prompt:
    """Read and deserialize a Prompt from a UTF-8 JSON file.

    Raises:
        PromptFormatError: If the file is not UTF-8 text or holds an invalid prompt.
        OSError: If the file cannot be read.
    """
    try:
        json_str = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PromptFormatError(
            f"File is not valid UTF-8: {e.reason} at byte {e.start}"
        ) from e

    return import_prompt(json_str)
