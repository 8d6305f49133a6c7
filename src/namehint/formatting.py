"""
Display formatting for suggestion payloads.

The ranker passes payloads through untouched; this module is the layer
that turns them into the lines of a "Did you mean" message. Hosts describe
the symbols they collected with ``SymbolInfo``, or pass plain strings.

Example:
    >>> info = SymbolInfo(
    ...     name="GetValue",
    ...     kind=SymbolKind.METHOD,
    ...     type_name="int",
    ...     owner="Sample.Calculator",
    ...     parameters=(Parameter("key", "string"),),
    ... )
    >>> format_symbol(info)
    '[Method] int Sample.Calculator.GetValue(string key)'
    >>> format_member(info)
    'GetValue(key: string): int'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

UNKNOWN_OWNER = "Unknown"
DEFAULT_TYPE = "object"
VOID_TYPES = frozenset({"void", "None"})


class SymbolKind(Enum):
    """The kind of symbol a payload describes."""

    METHOD = "Method"
    PROPERTY = "Property"
    FIELD = "Field"
    LOCAL = "Local"
    PARAMETER = "Parameter"
    TYPE = "Class"
    NAMESPACE = "Namespace"


@dataclass(frozen=True, slots=True)
class Parameter:
    """
    A method parameter.

    Attributes:
        name: Parameter name
        type_name: Display name of the parameter type
        modifier: Passing modifier such as "ref", "out" or "in"
    """

    name: str
    type_name: str = DEFAULT_TYPE
    modifier: str = ""

    def signature(self) -> str:
        """Get ``[modifier ]type name``."""
        prefix = f"{self.modifier} " if self.modifier else ""
        return f"{prefix}{self.type_name} {self.name}"


@dataclass(frozen=True, slots=True)
class SymbolInfo:
    """
    A host symbol described for display.

    Attributes:
        name: Simple symbol name
        kind: What the symbol is
        type_name: Value type (return type for methods)
        owner: Qualified name of the containing type
        parameters: Method parameters
        type_parameters: Generic type parameter names
        is_static: Whether the member is static
        readable: Whether a property has a getter
        writable: Whether a property has a setter
    """

    name: str
    kind: SymbolKind
    type_name: Optional[str] = None
    owner: Optional[str] = None
    parameters: tuple[Parameter, ...] = ()
    type_parameters: tuple[str, ...] = ()
    is_static: bool = False
    readable: bool = True
    writable: bool = False

    @property
    def display_type(self) -> str:
        return self.type_name or DEFAULT_TYPE

    @property
    def qualified_name(self) -> str:
        return f"{self.owner or UNKNOWN_OWNER}.{self.name}"


def _accessors(info: SymbolInfo) -> str:
    parts = []
    if info.readable:
        parts.append("get;")
    if info.writable:
        parts.append("set;")
    return "{ " + " ".join(parts) + " }"


def _generic_suffix(info: SymbolInfo) -> str:
    if not info.type_parameters:
        return ""
    return "<" + ", ".join(info.type_parameters) + ">"


def format_symbol(info: Optional[SymbolInfo]) -> str:
    """
    Format a symbol with a kind label, e.g. ``[Field] int Owner.count``.
    """
    if info is None:
        return "[Unknown]"

    kind = info.kind
    if kind is SymbolKind.METHOD:
        params = ", ".join(p.signature() for p in info.parameters)
        return f"[Method] {info.display_type} {info.qualified_name}({params})"
    if kind is SymbolKind.PROPERTY:
        return f"[Property] {info.display_type} {info.qualified_name} {_accessors(info)}"
    if kind is SymbolKind.FIELD:
        return f"[Field] {info.display_type} {info.qualified_name}"
    if kind is SymbolKind.LOCAL:
        return f"[Local] {info.display_type} {info.name}"
    if kind is SymbolKind.PARAMETER:
        return f"[Parameter] {info.display_type} {info.name}"
    if kind is SymbolKind.TYPE:
        if info.owner:
            return f"[Class] {info.owner}.{info.name}"
        return f"[Class] {info.name}"
    return info.name


def format_signature(info: SymbolInfo) -> str:
    """
    Format a member signature without a label.

    Methods render as ``int Name<T>(ref int x)``, properties as
    ``static int Name { get; set; }`` and fields as ``static int Name``.
    """
    static = "static " if info.is_static else ""
    kind = info.kind
    if kind is SymbolKind.METHOD:
        params = ", ".join(p.signature() for p in info.parameters)
        return f"{info.display_type} {info.name}{_generic_suffix(info)}({params})"
    if kind is SymbolKind.PROPERTY:
        return f"{static}{info.display_type} {info.name} {_accessors(info)}"
    if kind is SymbolKind.FIELD:
        return f"{static}{info.display_type} {info.name}"
    return info.name


def format_member(info: SymbolInfo) -> str:
    """
    Format a compact member line: ``Name(x: int): str`` or ``Name: int``.

    A void return type is omitted.
    """
    kind = info.kind
    if kind is SymbolKind.METHOD:
        params = ", ".join(f"{p.name}: {p.type_name}" for p in info.parameters)
        display = f"{info.name}({params})"
        if info.type_name and info.type_name not in VOID_TYPES:
            display += f": {info.type_name}"
        return display
    if kind in (SymbolKind.PROPERTY, SymbolKind.FIELD):
        return f"{info.name}: {info.display_type}"
    return info.name


def entity_kind(payload: Any) -> str:
    """Get the kind label for any payload."""
    if payload is None:
        return "Unknown"
    if isinstance(payload, SymbolInfo):
        return payload.kind.value
    if isinstance(payload, str):
        return SymbolKind.TYPE.value
    return "Identifier"


def format_any(payload: Any) -> str:
    """
    Format any payload for a suggestion line.

    ``SymbolInfo`` gets the labelled form, strings are shown as they are,
    and anything else falls back to ``str()``.
    """
    if payload is None:
        return "[Unknown]"
    if isinstance(payload, SymbolInfo):
        return format_symbol(payload)
    if isinstance(payload, str):
        return payload
    return str(payload)


__all__ = [
    "SymbolKind",
    "Parameter",
    "SymbolInfo",
    "format_symbol",
    "format_signature",
    "format_member",
    "entity_kind",
    "format_any",
]
