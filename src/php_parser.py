"""Parse PHP language files that return a nested array literal."""

import re
from typing import Any, Dict, List, Optional, Union

import tree_sitter_php
from tree_sitter import Language, Node, Parser


PHP_LANGUAGE = Language(tree_sitter_php.language_php())

_SINGLE_QUOTED_ESCAPE = re.compile(r"\\([\\'])")

# Escapes recognised inside double quotes, plus the start of a variable interpolation
_DOUBLE_QUOTED_TOKEN = re.compile(
    r"\\(?:(?P<simple>[nrtvef\\$\"])"
    r"|(?P<octal>[0-7]{1,3})"
    r"|x(?P<hex>[0-9A-Fa-f]{1,2})"
    r"|u\{(?P<unicode>[0-9A-Fa-f]+)\})"
    r"|(?P<interpolation>\$[A-Za-z_\x80-\U0010ffff]|\{\$)"
)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "e": "\x1b",
    "f": "\f",
    "\\": "\\",
    "$": "$",
    '"': '"',
}


class LangParseError(Exception):
    """Raised when a language file cannot be turned into translations."""

    def __init__(self, message: str, source_name: str = "<string>", line: Optional[int] = None):
        self.message = message
        self.source_name = source_name
        self.line = line
        location = source_name if line is None else f"{source_name}:{line}"
        super().__init__(f"{location}: {message}")


class PhpSyntaxError(LangParseError):
    """Raised when the PHP source does not parse."""
    pass


class UnsupportedExpressionError(LangParseError):
    """Raised for PHP expressions that have no translation equivalent."""
    pass


def decode_string_literal(text: str) -> str:
    """
    Decode a single- or double-quoted PHP string literal.

    Args:
        text: Literal as written in the source, including quotes

    Returns:
        The string value

    Raises:
        ValueError: If the literal interpolates variables or is not a string literal
    """
    if text[:1] in ("b", "B"):
        text = text[1:]

    if len(text) < 2 or text[0] != text[-1] or text[0] not in ("'", '"'):
        raise ValueError(f"not a string literal: {text!r}")

    body = text[1:-1]
    if text[0] == "'":
        return _SINGLE_QUOTED_ESCAPE.sub(r"\1", body)

    # Escapes produce raw bytes, so build bytes and decode once at the end
    decoded = bytearray()
    position = 0
    for match in _DOUBLE_QUOTED_TOKEN.finditer(body):
        decoded += body[position:match.start()].encode("utf-8")
        position = match.end()

        if match.group("interpolation"):
            raise ValueError("variable interpolation is not supported")
        if match.group("simple"):
            decoded += _SIMPLE_ESCAPES[match.group("simple")].encode("utf-8")
        elif match.group("octal"):
            decoded.append(int(match.group("octal"), 8) & 0xFF)
        elif match.group("hex"):
            decoded.append(int(match.group("hex"), 16))
        else:
            decoded += chr(int(match.group("unicode"), 16)).encode("utf-8")

    decoded += body[position:].encode("utf-8")
    return decoded.decode("utf-8", errors="replace")


def parse_lang_source(
    source: Union[str, bytes],
    strict: bool = False,
    warnings: Optional[List[str]] = None,
    source_name: str = "<string>"
) -> Dict[str, Any]:
    """
    Parse the source of a PHP language file into a nested translation tree.

    The first top-level ``return`` statement must return an array literal,
    otherwise the file holds no translations and an empty dict is returned.

    Args:
        source: PHP source code
        strict: Raise on unsupported expressions instead of dropping them
        warnings: Optional list that receives a message per dropped item
        source_name: Name used in error and warning messages

    Returns:
        Nested dictionary of string keys to strings, None or sub-dictionaries

    Raises:
        PhpSyntaxError: If the source is not valid PHP
        UnsupportedExpressionError: If strict and an item cannot be converted
    """
    if isinstance(source, str):
        source = source.encode("utf-8")

    root = Parser(PHP_LANGUAGE).parse(source).root_node
    if root.has_error:
        error_node = _first_error(root)
        line = error_node.start_point[0] + 1 if error_node is not None else None
        raise PhpSyntaxError("invalid PHP syntax", source_name, line)

    statement = next(
        (child for child in root.named_children if child.type == "return_statement"),
        None
    )
    if statement is None:
        return {}

    returned = _expressions(statement)
    if not returned or returned[0].type != "array_creation_expression":
        return {}

    converter = _ArrayConverter(strict, warnings, source_name)
    try:
        return converter.convert(returned[0], [])
    except UnsupportedExpressionError as e:
        if strict:
            raise
        converter.warn(e)
        return {}


def _first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _expressions(node: Node) -> List[Node]:
    return [child for child in node.named_children if child.type != "comment"]


def _is_keyed(item: Node) -> bool:
    return any(child.type == "=>" for child in item.children)


class _ArrayConverter:
    """Converts array literal nodes, collecting or raising on unsupported input."""

    def __init__(self, strict: bool, warnings: Optional[List[str]], source_name: str):
        self.strict = strict
        self.warnings = warnings
        self.source_name = source_name

    def warn(self, error: LangParseError) -> None:
        if self.warnings is not None:
            self.warnings.append(f"{error}; item skipped")

    def unsupported(self, node: Node, reason: str, path: List[str]) -> UnsupportedExpressionError:
        if path:
            reason = f"{reason} at '{'.'.join(path)}'"
        return UnsupportedExpressionError(reason, self.source_name, node.start_point[0] + 1)

    def convert(self, node: Node, path: List[str]) -> Any:
        kind = node.type

        if kind == "array_creation_expression":
            return self._convert_array(node, path)

        if kind in ("string", "encapsed_string"):
            try:
                return decode_string_literal(node.text.decode("utf-8", errors="replace"))
            except ValueError as e:
                raise self.unsupported(node, str(e), path) from e

        if kind == "null":
            return None

        if kind == "binary_expression":
            return self._convert_concatenation(node, path)

        if kind == "parenthesized_expression":
            inner = _expressions(node)
            if len(inner) == 1:
                return self.convert(inner[0], path)

        raise self.unsupported(node, f"unsupported expression '{kind}'", path)

    def _convert_array(self, node: Node, path: List[str]) -> Dict[str, Any]:
        items = _expressions(node)

        # Indexed and mixed arrays have no dot-path representation
        if not all(_is_keyed(item) for item in items):
            raise self.unsupported(node, "indexed array", path)

        tree: Dict[str, Any] = {}
        for item in items:
            parts = _expressions(item)
            try:
                key = self._convert_key(parts[0], path)
                tree[key] = self.convert(parts[-1], path + [key])
            except UnsupportedExpressionError as e:
                if self.strict:
                    raise
                self.warn(e)
        return tree

    def _convert_key(self, node: Node, path: List[str]) -> str:
        if node.type == "integer":
            return node.text.decode("utf-8")

        key = self.convert(node, path)
        if not isinstance(key, str):
            raise self.unsupported(node, "array key must be a string or integer", path)
        return key

    def _convert_concatenation(self, node: Node, path: List[str]) -> str:
        operator = node.child_by_field_name("operator")
        if operator is None or operator.type != ".":
            raise self.unsupported(node, "only string concatenation is supported", path)

        parts = []
        for field in ("left", "right"):
            value = self.convert(node.child_by_field_name(field), path)
            if isinstance(value, dict):
                raise self.unsupported(node, "cannot concatenate an array", path)
            # null concatenates as an empty string
            parts.append(value or "")
        return "".join(parts)
