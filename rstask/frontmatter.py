"""
RSTASK - Task File Codec
========================
Converts a Task to markdown with a YAML frontmatter header and back.

The notes become the markdown body; every other persisted field goes into
the header. uuid, status and display id are not stored in the file: the
caller knows them from the file's location and passes them in on decode.
"""

from datetime import datetime
from typing import List

import yaml
from pydantic import ValidationError

from .errors import FormatError, ParseError
from .schema import Task, TaskFrontmatter, utc

DELIMITER = "---"


class _HeaderDumper(yaml.SafeDumper):
    """SafeDumper writing datetimes as RFC 3339 UTC timestamps"""


def format_timestamp(value: datetime) -> str:
    """2024-01-01T00:00:00Z (fractional seconds kept when present)"""
    return utc(value).isoformat().replace("+00:00", "Z")


def _represent_datetime(dumper: yaml.SafeDumper, value: datetime) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:timestamp", format_timestamp(value))


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    # A raw NEL inside a quoted scalar reads back as a line break
    if "\x85" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style='"')
    return dumper.represent_str(value)


_HeaderDumper.add_representer(datetime, _represent_datetime)
_HeaderDumper.add_representer(str, _represent_str)


# ========================================
# ENCODE
# ========================================

def task_to_markdown(task: Task) -> str:
    """Serialize a task to markdown with YAML frontmatter"""
    try:
        header = TaskFrontmatter.from_task(task)
        yaml_frontmatter = yaml.dump(
            header.model_dump(exclude_none=True),
            Dumper=_HeaderDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
            width=float("inf"),
        )
    except (yaml.YAMLError, ValidationError) as e:
        raise FormatError(f"cannot serialize frontmatter for task {task.uuid}: {e}") from e

    result = f"{DELIMITER}\n{yaml_frontmatter}{DELIMITER}\n"

    if task.notes:
        result += "\n" + task.notes
        if not task.notes.endswith("\n"):
            result += "\n"

    return result


# ========================================
# DECODE
# ========================================

def _split_lines(content: str) -> List[str]:
    """Split on \\n; a final newline adds no empty line, a trailing \\r is dropped"""
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def task_from_markdown(content: str, uuid: str, status: str, id: int) -> Task:
    """Deserialize a task from markdown with YAML frontmatter"""
    lines = _split_lines(content)

    if not lines or lines[0] != DELIMITER:
        raise ParseError("missing frontmatter delimiter")

    try:
        closing_idx = lines.index(DELIMITER, 1)
    except ValueError:
        raise ParseError("missing closing frontmatter delimiter") from None

    frontmatter_str = "\n".join(lines[1:closing_idx])

    # Leading blank lines are dropped, everything else is kept as written
    notes = "\n".join(lines[closing_idx + 1:]).lstrip("\n")

    try:
        data = yaml.safe_load(frontmatter_str)
    except yaml.YAMLError as e:
        raise ParseError(f"invalid frontmatter YAML: {e}") from e

    try:
        frontmatter = TaskFrontmatter.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"invalid frontmatter: {e}") from e

    return frontmatter.to_task(uuid=uuid, status=status, id=id, notes=notes)


# Short names for callers that think in encode / decode terms
encode = task_to_markdown
decode = task_from_markdown
