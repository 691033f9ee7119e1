"""Type Generation Package"""

from pfcli.typegen.fetch import fetch_json
from pfcli.typegen.generator import TypeGenRequest, generate_types, infer_types, select_sample
from pfcli.typegen.validation import require_valid, validate_directory, validate_type_name, validate_url
from pfcli.typegen.writer import type_file_path, write_type_file

__all__ = [
    "fetch_json",
    "TypeGenRequest",
    "generate_types",
    "infer_types",
    "select_sample",
    "require_valid",
    "validate_directory",
    "validate_type_name",
    "validate_url",
    "type_file_path",
    "write_type_file",
]
