"""Type Generator - Infer Pydantic models from a sample JSON payload."""

import json
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from datamodel_code_generator import DataModelType, Error, InputFileType, generate

from pfcli import TYPE_FILE_EXTENSION
from pfcli.errors import EmptyGenerationError, GenerationError, ValidationError
from pfcli.typegen.fetch import DEFAULT_TIMEOUT, fetch_json
from pfcli.typegen.validation import require_valid, validate_type_name, validate_url

# The one target language: Pydantic v2 models
OUTPUT_MODEL_TYPE = DataModelType.PydanticV2BaseModel

Progress = Callable[[str], None]


def select_sample(payload: Any) -> Any:
    """Arrays are sampled by their first element, anything else is used whole."""
    if isinstance(payload, list):
        if not payload:
            raise EmptyGenerationError("API returned an empty array, nothing to infer types from")
        return payload[0]
    return payload


def infer_types(sample: Any, name: str) -> list[str]:
    """Run sample-based inference and return the generated source lines.

    Keys are sorted before inference so generated fields come out
    alphabetized.
    """
    source = json.dumps(sample, sort_keys=True)

    with tempfile.TemporaryDirectory() as tmp:
        output = Path(tmp) / f"{name}{TYPE_FILE_EXTENSION}"
        try:
            generate(
                source,
                input_file_type=InputFileType.Json,
                input_filename=f"{name}.json",
                output=output,
                output_model_type=OUTPUT_MODEL_TYPE,
                class_name=name,
                disable_timestamp=True,
            )
        except (Error, ValueError) as e:
            raise GenerationError(f"Type inference failed: {e}")
        text = output.read_text(encoding='utf-8') if output.exists() else ""

    if not text.strip():
        raise EmptyGenerationError()
    return text.rstrip('\n').split('\n')


def generate_types(
    url: str,
    name: str,
    timeout: int = DEFAULT_TIMEOUT,
    fetch: Optional[Callable[..., Any]] = None,
    progress: Optional[Progress] = None,
) -> list[str]:
    """Fetch url and return type definition lines for a root type called name."""
    # Validate before touching the network
    require_valid(validate_type_name, name)
    require_valid(validate_url, url)

    step = progress or (lambda text: None)

    step("Fetching API data...")
    payload = (fetch or fetch_json)(url, timeout=timeout)

    step("Parsing data structure...")
    sample = select_sample(payload)

    step("Generating type definitions...")
    return infer_types(sample, name)


@dataclass
class TypeGenRequest:
    """What to fetch, what to call the root type, and where to save it."""
    url: str
    name: str
    path: str

    def validate(self) -> 'TypeGenRequest':
        require_valid(validate_url, self.url)
        require_valid(validate_type_name, self.name)
        target = Path(self.path).expanduser()
        if target.exists() and not target.is_dir():
            raise ValidationError(f"Save path is not a directory: {self.path!r}")
        return self
