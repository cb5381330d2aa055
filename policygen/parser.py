from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Any, Iterable

_INTEGER_RE = re.compile(r"[0-9]+")
_QUOTES = {'"', "'"}


@dataclass
class _Frame:
    """One open context: the container being filled and where it is bound.

    ``owner`` is the mapping that holds ``node`` under ``key``; it is what makes
    promoting an empty placeholder mapping to a sequence possible.
    """

    indent: int
    key: str | None
    node: dict[str, Any] | list[Any]
    owner: dict[str, Any] | None = None


def parse_policy_text(text: str) -> dict[str, Any]:
    """Parse the indentation-structured policy config into plain dicts/lists.

    Only the subset used by policy configs is understood: ``key: value``,
    ``key: [a, b]``, and sequences of mappings introduced by ``- ``. Lines
    outside that shape are dropped rather than reported.
    """
    root: dict[str, Any] = {}
    stack: list[_Frame] = [_Frame(indent=-1, key=None, node=root)]

    for raw in _significant_lines(text.splitlines()):
        indent = len(raw) - len(raw.lstrip(" "))
        line = raw.strip()

        while stack[-1].indent >= indent:
            stack.pop()

        if line.startswith("- "):
            _add_sequence_item(stack, indent, line)
        else:
            _add_key_value(stack, indent, line)

    return root


def parse_policy_file(path: Path) -> dict[str, Any]:
    return parse_policy_text(path.read_text(encoding="utf-8"))


def decode_value(raw: str) -> Any:
    if not raw:
        # nested block follows; mapping or sequence is decided by the next line
        return {}
    if len(raw) >= 2 and raw.startswith("[") and raw.endswith("]"):
        return _parse_inline_list(raw)
    if _is_quoted(raw):
        return raw[1:-1]
    if raw in {"true", "false"}:
        return raw == "true"
    if _INTEGER_RE.fullmatch(raw):
        return int(raw)
    return raw


def _significant_lines(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        normalized = line.replace("\t", "  ")
        stripped = normalized.strip()
        if not stripped or stripped.startswith("#"):
            continue
        yield normalized.rstrip()


def _add_sequence_item(stack: list[_Frame], indent: int, line: str) -> None:
    frame = stack[-1]
    if not isinstance(frame.node, list):
        frame = _promote_to_sequence(stack)
        if frame is None:
            return

    item: dict[str, Any] = {}
    frame.node.append(item)
    stack.append(_Frame(indent=indent, key=None, node=item))

    content = line[2:].lstrip()
    if ":" in content:
        key_indent = indent + len(line) - len(content)
        key, raw = _split_pair(content)
        _assign(stack, key_indent, item, key, raw)


def _promote_to_sequence(stack: list[_Frame]) -> _Frame | None:
    frame = stack[-1]
    if frame.owner is None or frame.key is None:
        return None
    # a mapping that already holds keys stays a mapping; the list line is dropped
    if not isinstance(frame.node, dict) or frame.node:
        return None
    if frame.owner.get(frame.key) is not frame.node:
        return None
    sequence: list[Any] = []
    frame.owner[frame.key] = sequence
    promoted = _Frame(indent=frame.indent, key=frame.key, node=sequence, owner=frame.owner)
    stack[-1] = promoted
    return promoted


def _add_key_value(stack: list[_Frame], indent: int, line: str) -> None:
    if ":" not in line:
        return
    key, raw = _split_pair(line)
    holder = stack[-1].node
    if isinstance(holder, list):
        if not holder or not isinstance(holder[-1], dict):
            return
        holder = holder[-1]
    _assign(stack, indent, holder, key, raw)


def _assign(
    stack: list[_Frame],
    indent: int,
    holder: dict[str, Any],
    key: str,
    raw: str,
) -> None:
    value = decode_value(raw)
    holder[key] = value
    if isinstance(value, (dict, list)):
        stack.append(_Frame(indent=indent, key=key, node=value, owner=holder))


def _split_pair(text: str) -> tuple[str, str]:
    key, _, raw = text.partition(":")
    return key.strip(), raw.strip()


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value[0] in _QUOTES and value[0] == value[-1]


def _parse_inline_list(raw: str) -> list[str]:
    inner = raw[1:-1].strip()
    if not inner:
        return []
    items: list[str] = []
    for part in inner.split(","):
        part = part.strip()
        items.append(part[1:-1] if _is_quoted(part) else part)
    return items
