from __future__ import annotations

import codecs
import re
from typing import Any, Dict

import yaml
from pydantic import BaseModel, field_validator

from .log import DEFAULT_DATEFMT, DEFAULT_FORMAT

"""
Config layer
- load_yaml(path) -> dict
- PrinterConfig (Pydantic v2) + validate_config(raw) -> PrinterConfig
- load_config(path) -> PrinterConfig

The CLI runs on PrinterConfig() defaults; the loaders are for programs that
embed lineprint and want a different greeting or output.
"""

DEFAULT_GREETING = "Good morning!"


#This function loads and parses YAML into a raw dictionary using yaml.safe_load.
def load_yaml(path: str) -> Dict[str, Any]:
    """
    Load and parse YAML into raw dict using yaml.safe_load.

    Raises:
        FileNotFoundError: if the file does not exist
        yaml.YAMLError: if YAML is malformed/unsafe
        ValueError: if the top-level document is not a mapping
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        # Treat empty file as empty mapping, so every default applies
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Top-level YAML must be a mapping/dict (file: {path})")
    return data


# Allowed outputs: exactly 'stdout', 'file:<path>', or 'tcp:<host>:<port>'
_TCP_RE = re.compile(r"^tcp:([^:]+):(\d{1,5})$")  # simple host:port (no IPv6 colons)


class PrinterConfig(BaseModel):
    greeting: str = DEFAULT_GREETING
    output: str = "stdout"
    encoding: str = "utf-8"
    log_format: str = DEFAULT_FORMAT
    log_datefmt: str = DEFAULT_DATEFMT

    # --- Validators ---

    @field_validator("greeting")
    @classmethod
    def _greeting_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("greeting must be a non-empty string")
        return v

    #This validator checks that the codec is one Python knows about.
    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            return codecs.lookup(v).name
        except LookupError:
            raise ValueError(f"unknown encoding: {v!r}") from None

    #This validator checks if the output is exactly 'stdout', 'file:<path>', or 'tcp:<host>:<port>'.
    @field_validator("output")
    @classmethod
    def _output_allowed_only(cls, s: str) -> str:
        if s == "stdout":
            return s
        if s.startswith("file:"):
            if not s.removeprefix("file:"):
                raise ValueError("file output must be 'file:<path>' with a non-empty path")
            return s
        m = _TCP_RE.match(s)
        if m:
            port = int(m.group(2))
            if not (1 <= port <= 65535):
                raise ValueError("tcp port must be 1..65535")
            return s
        raise ValueError("output must be exactly 'stdout', 'file:<path>', or 'tcp:<host>:<port>'")


#This function validates and normalizes a raw dictionary into a PrinterConfig object.
def validate_config(raw: dict[str, Any]) -> PrinterConfig:
    return PrinterConfig.model_validate(raw)


def load_config(path: str) -> PrinterConfig:
    return validate_config(load_yaml(path))


__all__ = ["DEFAULT_GREETING", "load_yaml", "PrinterConfig", "validate_config", "load_config"]
