"""Derive the initial props of a new component instance from its schema."""

import copy
from typing import Any, Mapping

from .enums import FieldKind
from .errors import SchemaDefinitionError
from .models import SchemaNode, is_container

SKIPPED_KINDS = frozenset({FieldKind.HIDDEN.value, FieldKind.SLOT.value})


def derive_default_props(tree: Mapping[str, SchemaNode]) -> dict[str, Any]:
    """Collect the ``default`` of every leaf into a nested props dict.

    Containers become nested dicts. ``hidden`` and ``slot`` fields are
    skipped. An ``array`` field with an explicit ``default`` (including
    ``[]``) uses it as is, so a default set through ``apply_defaults`` is
    honoured; item derivation never overrides it. Only an array without a
    default yields a single item derived from its ``item_fields``. Default
    values are deep-copied, so instances never share mutable state with the
    schema or each other.

    Raises:
        SchemaDefinitionError: An array field has neither a default nor
            ``item_fields``
    """
    props: dict[str, Any] = {}

    for name, node in tree.items():
        if is_container(node):
            props[name] = derive_default_props(node.children)
        elif node.kind in SKIPPED_KINDS:
            continue
        elif node.kind == FieldKind.ARRAY.value and node.default is None:
            if node.item_fields is None:
                raise SchemaDefinitionError(
                    f"Array field '{name}' must define item_fields or a default"
                )
            props[name] = [derive_default_props(node.item_fields)]
        else:
            props[name] = copy.deepcopy(node.default)

    return props
