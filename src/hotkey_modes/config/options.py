from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigReadError


class ParserOptions(BaseModel):
    """Tunables for reading and parsing a config."""

    # Longest accepted `a, b, ...` mode list or `cmd + shift + ...` chain.
    max_chain_length: int = Field(default=64, ge=1)
    encoding: str = "utf-8"


def load_options(path: str | Path) -> ParserOptions:
    """Load parser options from a TOML file."""

    path = Path(path)
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigReadError(f"cannot read options: {e.strerror}", str(path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigReadError(f"invalid options file: {e}", str(path)) from e

    try:
        return ParserOptions.model_validate(data)
    except ValidationError as e:
        raise ConfigReadError(f"invalid options file: {e}", str(path)) from e
