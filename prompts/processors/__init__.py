"""Default format handlers, one per prompt file encoding."""

from .javascript import process_js_file
from .json_file import process_json_file
from .jsonl_file import process_jsonl_file
from .literal import process_string
from .markdown import process_markdown_file
from .python_file import process_python_file
from .text import process_txt_file
from .yaml_file import process_yaml_file

__all__ = [
    "process_js_file",
    "process_json_file",
    "process_jsonl_file",
    "process_markdown_file",
    "process_python_file",
    "process_string",
    "process_txt_file",
    "process_yaml_file",
]
