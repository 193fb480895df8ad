"""
Reading the genesis template and writing the finished genesis document.

The template provides the chain parameters and the two fixed contract
accounts with their bytecode. Any top-level field it carries is written back
unchanged.
"""

import json
import logging
import pkgutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from pydantic import ConfigDict, Field, ValidationError

from genesis_types import Alloc, CamelModel, to_json

from .constants import GOVERNANCE_CONTRACT_ADDRESS, VOTING_CONTRACT_ADDRESS

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "assets/template.json"


@dataclass(kw_only=True)
class TemplateError(Exception):
    """The genesis template cannot be used to build a genesis document."""

    source: str
    reason: str

    def __str__(self):
        """Print exception string."""
        return f"Genesis template '{self.source}' {self.reason}"


class GenesisDocument(CamelModel):
    """A genesis document as read by the node at network bootstrap."""

    model_config = ConfigDict(extra="allow")

    config: Dict[str, Any] = Field(default_factory=dict)
    """Chain configuration, kept as found in the template."""
    gas_limit: int | str | None = None
    alloc: Alloc = Field(default_factory=Alloc)

    def fresh_copy(self) -> "GenesisDocument":
        """Return an independent copy whose accounts can be changed freely."""
        return GenesisDocument.model_validate(self.serialize(mode="json", by_alias=True))


def parse_template(data: Any, source: str) -> GenesisDocument:
    """Validate template data and check that both fixed contracts are present."""
    if not isinstance(data, dict):
        raise TemplateError(source=source, reason="is not a JSON object")
    try:
        document = GenesisDocument.model_validate(data)
    except ValidationError as e:
        raise TemplateError(source=source, reason=f"is malformed: {e}") from e
    for address in (VOTING_CONTRACT_ADDRESS, GOVERNANCE_CONTRACT_ADDRESS):
        if address not in document.alloc:
            raise TemplateError(source=source, reason=f"has no account for contract {address}")
    return document


def load_template(path: Path | None = None) -> GenesisDocument:
    """
    Load the genesis template from `path`, or the packaged default when no
    path is given.
    """
    if path is None:
        source = f"quorum_genesis/{DEFAULT_TEMPLATE}"
        template_bytes = pkgutil.get_data("quorum_genesis", DEFAULT_TEMPLATE)
        if template_bytes is None:
            raise TemplateError(source=source, reason="cannot be read")
        raw = template_bytes.decode()
    else:
        source = str(path)
        if not path.is_file():
            raise TemplateError(source=source, reason="does not exist")
        raw = path.read_text()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TemplateError(source=source, reason=f"is not valid JSON: {e}") from e
    logger.debug(f"Loaded genesis template from {source}")
    return parse_template(data, source)


def dump_genesis(document: GenesisDocument) -> str:
    """Return the JSON text of `document`; equal documents give identical text."""
    return json.dumps(to_json(document), indent=2) + "\n"


def write_genesis(document: GenesisDocument, path: Path) -> None:
    """Write `document` to `path` in one call."""
    path.write_text(dump_genesis(document))
    logger.info(f"Wrote genesis with {len(document.alloc)} accounts to {path}")
