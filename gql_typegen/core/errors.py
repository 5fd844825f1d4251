"""Errors raised while building the schema context or transforming documents."""


class TypegenError(Exception):
    """Base class for all gql-typegen errors."""


class MissingFragmentError(TypegenError):
    """A fragment spread references a fragment that is not defined in the batch."""

    def __init__(self, fragment_name: str, site: str):
        self.fragment_name = fragment_name
        self.site = site
        super().__init__(f"Unknown fragment '{fragment_name}' spread at {site}")


class SelectionSchemaMismatchError(TypegenError):
    """A selection does not match the schema it is transformed against."""

    def __init__(self, type_name: str | None, field_name: str | None, site: str, reason: str = ""):
        self.type_name = type_name
        self.field_name = field_name
        self.site = site
        if not reason:
            reason = f"type '{type_name}' has no field '{field_name}'"
        super().__init__(f"Cannot transform selection at {site}: {reason}")


class NameCollisionError(TypegenError):
    """Two distinct generated entities were assigned the same name."""

    def __init__(self, name: str, scope: str):
        self.name = name
        self.scope = scope
        super().__init__(f"Name '{name}' is already used in {scope}")
