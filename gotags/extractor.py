"""Walks a declaration tree and yields the names worth tagging."""

from __future__ import annotations

from typing import Iterator

from tree_sitter import Node

from .models import TaggableIdentifier
from .parser import DeclarationTree

_FUNCTION_KINDS = {
    "function_declaration": "func",
    "method_declaration": "method",
}

_GROUPED_KINDS = {
    "type_declaration": "type",
    "const_declaration": "const",
    "var_declaration": "var",
}

_SPEC_TYPES = {"type_spec", "type_alias", "const_spec", "var_spec"}


def extract_identifiers(tree: DeclarationTree) -> Iterator[TaggableIdentifier]:
    """Yield every top-level function, type and value name in walk order.

    Bodies are never entered, so locals, struct fields, parameters and
    nested closures never show up.
    """
    for declaration in tree.declarations:
        if declaration.type in _FUNCTION_KINDS:
            name = declaration.child_by_field_name("name")
            if name is not None:
                yield _identifier(tree, name, _FUNCTION_KINDS[declaration.type])
        elif declaration.type in _GROUPED_KINDS:
            kind = _GROUPED_KINDS[declaration.type]
            for spec in _specs(declaration):
                # const/var specs repeat the "name" field once per identifier.
                for name in spec.children_by_field_name("name"):
                    if name.is_named:
                        yield _identifier(tree, name, kind)


def _specs(node: Node) -> Iterator[Node]:
    for child in node.named_children:
        if child.type in _SPEC_TYPES:
            yield child
        elif child.type.endswith("_spec_list"):
            yield from _specs(child)


def _identifier(tree: DeclarationTree, node: Node, kind: str) -> TaggableIdentifier:
    return TaggableIdentifier(
        name=(node.text or b"").decode("utf-8"),
        kind=kind,
        position=tree.resolve(node),
    )


__all__ = ["extract_identifiers"]
