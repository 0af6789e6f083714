"""Exception definitions for fieldschema"""


class FieldSchemaException(Exception):
    """Base exception for all fieldschema errors.

    All custom exceptions in the package inherit from this class.
    Use this as a catch-all when you don't need to handle specific
    exception types.
    """

    pass


class ConfigException(FieldSchemaException):
    """Raised when settings validation or loading fails.

    Use this exception when:
    - The settings file cannot be found
    - The TOML syntax is invalid
    - Settings validation fails (unknown log level, wrong types)
    """

    pass


class SchemaDefinitionError(FieldSchemaException):
    """Raised when a base schema cannot be used as authored.

    Use this exception when:
    - A raw schema mapping fails validation in ``parse_schema``
    - An array field is declared without ``item_fields``
    """

    pass


class SchemaTransformError(FieldSchemaException):
    """Raised in strict mode when a transform spec does not fit its target.

    Use this exception when:
    - A nested omit spec targets a leaf field
    - A nested extend spec targets a leaf field
    - A non-mapping defaults value targets a container field
    - An extend entry is neither a field nor a mapping

    Attributes:
        path: Dotted path of the offending key
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path
