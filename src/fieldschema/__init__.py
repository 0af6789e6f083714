from .config import Settings, get_settings
from .defaults import apply_defaults
from .derive import derive_default_props
from .enums import FieldKind
from .errors import (
    ConfigException,
    FieldSchemaException,
    SchemaDefinitionError,
    SchemaTransformError,
)
from .extend import apply_extend, build_children
from .models import (
    ContainerField,
    LeafField,
    SchemaNode,
    SchemaTree,
    TransformRequest,
    is_container,
    is_field,
    is_leaf,
    parse_schema,
    tag_extension,
)
from .omit import apply_omit
from .processor import process_schema

__all__ = [
    "ConfigException",
    "ContainerField",
    "FieldKind",
    "FieldSchemaException",
    "LeafField",
    "SchemaDefinitionError",
    "SchemaNode",
    "SchemaTransformError",
    "SchemaTree",
    "Settings",
    "TransformRequest",
    "apply_defaults",
    "apply_extend",
    "apply_omit",
    "build_children",
    "derive_default_props",
    "get_settings",
    "is_container",
    "is_field",
    "is_leaf",
    "parse_schema",
    "process_schema",
    "tag_extension",
]
