from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Callable, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from .enums import FieldKind
from .errors import SchemaDefinitionError


class BaseField(BaseModel):
    """Attributes shared by every schema node.

    Nodes are frozen: transforms produce new nodes with ``model_copy`` and
    never assign to an existing one. Unknown attributes are kept verbatim.
    """

    model_config = ConfigDict(frozen=True, extra="allow", arbitrary_types_allowed=True)

    label: Optional[str] = None
    description: Optional[str] = None


class LeafField(BaseField):
    """Terminal node describing one editable value."""

    kind: str
    default: Any = None
    options: Optional[list[Any]] = None
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    placeholder: Optional[str] = None
    visible: Optional[Callable[[Mapping[str, Any]], bool]] = None
    render: Optional[Callable[..., Any]] = None
    # Per-item schema of an ``array`` field. Transforms do not descend into it.
    item_fields: Optional[dict[str, SchemaNode]] = None

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: Any) -> Any:
        if isinstance(v, Enum):
            v = v.value
        if v == FieldKind.OBJECT.value:
            raise ValueError("Leaf fields cannot use kind 'object'; use ContainerField")
        return v

    def with_default(self, value: Any) -> LeafField:
        return self.model_copy(update={"default": value})


class ContainerField(BaseField):
    """Non-terminal node grouping named children in rendering order."""

    kind: Literal["object"] = "object"
    children: dict[str, SchemaNode] = Field(default_factory=dict)

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: Any) -> Any:
        if isinstance(v, Enum):
            return v.value
        return v

    def with_children(self, children: dict[str, SchemaNode]) -> ContainerField:
        return self.model_copy(update={"children": children})


def _node_tag(value: Any) -> str:
    if isinstance(value, Mapping):
        kind = value.get("kind")
    else:
        kind = getattr(value, "kind", None)
    return "object" if kind == FieldKind.OBJECT.value else "leaf"


SchemaNode = Annotated[
    Union[
        Annotated[ContainerField, Tag("object")],
        Annotated[LeafField, Tag("leaf")],
    ],
    Discriminator(_node_tag),
]

SchemaTree = dict[str, SchemaNode]

LeafField.model_rebuild()
ContainerField.model_rebuild()


def is_container(node: Any) -> bool:
    return isinstance(node, ContainerField)


def is_leaf(node: Any) -> bool:
    return isinstance(node, LeafField)


def is_field(value: Any) -> bool:
    """Return True for a ready-made schema node of either variant."""
    return isinstance(value, (LeafField, ContainerField))


_tree_adapter: TypeAdapter[SchemaTree] = TypeAdapter(SchemaTree)


def parse_schema(data: Mapping[str, Any]) -> SchemaTree:
    """Validate a statically authored mapping into a schema tree.

    Entries whose ``kind`` is ``"object"`` become ``ContainerField`` (their
    ``children`` parsed recursively), everything else becomes ``LeafField``.
    Values that already are schema nodes are kept as they are.

    Raises:
        SchemaDefinitionError: If any entry fails validation
    """
    try:
        return _tree_adapter.validate_python(dict(data))
    except ValidationError as e:
        error_lines = ["Schema validation failed:"]
        for error in e.errors():
            loc = " -> ".join(str(item) for item in error["loc"])
            error_lines.append(f"  - {loc}: {error['msg']}")
        raise SchemaDefinitionError("\n".join(error_lines)) from e


_node_adapter: TypeAdapter[SchemaNode] = TypeAdapter(SchemaNode)


def tag_extension(
    extension: Mapping[str, Any], parents: tuple[str, ...] = ()
) -> dict[str, Any]:
    """Resolve raw field literals inside an extend spec into schema nodes.

    A mapping whose ``kind`` is a string is a field literal and is parsed
    like an entry of ``parse_schema``. Any other mapping is a nested
    extension and is tagged recursively. Schema nodes and other values are
    passed through unchanged.

    Raises:
        SchemaDefinitionError: If a field literal fails validation
    """
    tagged: dict[str, Any] = {}
    for key, entry in extension.items():
        if isinstance(entry, Mapping) and not is_field(entry):
            path = (*parents, key)
            if isinstance(entry.get("kind"), str):
                try:
                    entry = _node_adapter.validate_python(dict(entry))
                except ValidationError as e:
                    raise SchemaDefinitionError(
                        f"Invalid field literal at {'.'.join(path)}: {e}"
                    ) from e
            else:
                entry = tag_extension(entry, path)
        tagged[key] = entry
    return tagged


class TransformRequest(BaseModel):
    """The ``{omit, extend, defaults}`` triple applied to a base schema.

    Each section mirrors the shape of the target tree:

    - ``omit``: ``True`` removes a key, a nested mapping recurses into a
      container, ``False`` as the whole section means "omit nothing".
    - ``extend``: values are ready-made ``LeafField``/``ContainerField``
      instances, field literals (mappings with a string ``kind``), or plain
      mappings describing new nested containers. Field literals are parsed
      into nodes on validation.
    - ``defaults``: replacement ``default`` values, or nested mappings for
      containers.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    omit: Union[bool, dict[str, Any], None] = None
    extend: Optional[dict[str, Any]] = None
    defaults: Optional[dict[str, Any]] = None

    @field_validator("extend", mode="after")
    @classmethod
    def tag_extend(cls, v: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
        if v is None:
            return v
        return tag_extension(v)

    def is_empty(self) -> bool:
        return self.omit is None and self.extend is None and self.defaults is None

    @classmethod
    def coerce(
        cls, value: Union[TransformRequest, Mapping[str, Any], None]
    ) -> TransformRequest:
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise SchemaDefinitionError(f"Invalid transform request: {e}") from e
