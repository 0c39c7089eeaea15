"""
Shared pieces for ``cardano-signer`` commands.

cardano-signer has no nouns: the command (``sign``, ``verify``, ...) is the
first argument and a mode flag such as ``--cip8`` selects the behaviour.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

import orjson

from ...errors import InvalidOutputError
from ...validation_guards import require_at_most_one, require_exactly_one
from ..base import CommandGroup

_DATA_FLAGS = {
    "data_hex": "--data-hex",
    "data_text": "--data",
    "data_file": "--data-file",
}


class SignerOutputFormat(str, Enum):
    HEX = "hex"
    JSON = "json"
    JSON_EXTENDED = "json-extended"

    @property
    def arguments(self) -> List[str]:
        # hex is what cardano-signer prints without a flag
        if self is SignerOutputFormat.HEX:
            return []
        return [f"--{self.value}"]


class SignerCommandGroup(CommandGroup):
    command = ""

    async def run(self, arguments: Sequence[str]) -> str:
        return await self.execute(self.command, arguments)


def data_arguments(
    *,
    required: bool = True,
    data_hex: Optional[str] = None,
    data_text: Optional[str] = None,
    data_file: Optional[Path | str] = None,
) -> List[str]:
    """
    Return the ``--data*`` pair for whichever payload input is set.

    Raises:
        InvalidParametersError: If more than one input is set, or none is set when *required*
    """
    inputs = {"data_hex": data_hex, "data_text": data_text, "data_file": data_file}
    if required:
        chosen: Optional[str] = require_exactly_one(**inputs)
    else:
        require_at_most_one(**inputs)
        chosen = next((name for name, value in inputs.items() if value is not None and str(value).strip()), None)
    if chosen is None:
        return []
    return [_DATA_FLAGS[chosen], str(inputs[chosen])]


def parse_verdict(output: str) -> bool:
    """Read a verify result from plain (``true``) or JSON (``{"result": "true"}``) output."""
    text = output.strip()
    if text.startswith("{"):
        try:
            payload = orjson.loads(text)
        except orjson.JSONDecodeError as exc:
            raise InvalidOutputError(f"Could not decode verify result: {exc}") from exc
        text = str(payload.get("result", "")).strip()
    return text.lower() == "true"
