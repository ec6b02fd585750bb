from __future__ import annotations

import json

DEFAULT_MESSAGES = {
    "scanning": "Checking files in {directory}",
    "no_metadata": "Skipping {name} because it has no EXIF data",
    "unrecognized": "Skipping {name} because its file format is not recognized",
    "already_named": "Skipping {name} because it is already named correctly",
    "renaming": "Renaming {name} as {target}",
    "error": "Error processing {name}: {error}",
}

# Fields each template is formatted with, always as strings.
_TEMPLATE_FIELDS = {
    "scanning": {"directory"},
    "no_metadata": {"name"},
    "unrecognized": {"name"},
    "already_named": {"name"},
    "renaming": {"name", "target"},
    "error": {"name", "error"},
}


def load_messages(config_path: str | None) -> dict[str, str]:
    """
    Loads console message templates, overriding the defaults with the
    entries of a JSON object.

    Raises:
        ValueError: The file is not a JSON object of known message names
            to templates that only use the fields of that message.
    """
    if not config_path:
        return DEFAULT_MESSAGES

    with open(config_path) as f:
        overrides = json.load(f)

    if not isinstance(overrides, dict):
        msg = f"{config_path} must contain a JSON object"
        raise ValueError(msg)

    unknown = set(overrides) - set(DEFAULT_MESSAGES)
    if unknown:
        msg = f"Unknown message keys in {config_path}: {', '.join(sorted(unknown))}"
        raise ValueError(msg)

    for key, template in overrides.items():
        if not isinstance(template, str):
            msg = f"Message {key!r} in {config_path} must be a string"
            raise ValueError(msg)

        try:
            template.format(**dict.fromkeys(_TEMPLATE_FIELDS[key], ""))
        except (KeyError, IndexError, AttributeError, ValueError) as err:
            allowed = ", ".join(f"{{{field}}}" for field in sorted(_TEMPLATE_FIELDS[key]))
            msg = f"Message {key!r} in {config_path} may only use {allowed}: {err!r}"
            raise ValueError(msg) from err

    return {**DEFAULT_MESSAGES, **overrides}
