"""Generator configuration.

Example:
    config = GeneratorConfig(enums_as_types=True, primitives={"Date": "string"})

    # or from the camelCase options of a JSON config file
    config = GeneratorConfig.from_dict({"immutableTypes": True, "custom": "A"})
    assert config.options == {"custom": "A"}
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

DEFAULT_PRIMITIVES = {
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
    "ID": "string",
}

# camelCase spellings accepted by from_dict
_ALIASES = {
    "immutableTypes": "immutable_types",
    "avoidOptionals": "avoid_optionals",
    "enumsAsTypes": "enums_as_types",
    "flattenTypes": "flatten_types",
    "customHelpers": "custom_helpers",
    "templateDir": "template_dir",
    "outFile": "out_file",
}


@dataclass
class GeneratorConfig:
    """Options controlling how the context tree is rendered.

    Attributes:
        immutable_types: Emit read-only field and array markers
        avoid_optionals: Drop the optional marker of nullable fields while
            keeping ``| null`` in their type
        enums_as_types: Render enums as unions of string literals
        flatten_types: Emit nested shapes as named types of the namespace
            instead of inline object types
        primitives: GraphQL scalar name -> target primitive type
        custom_helpers: Extra template filters/globals by name
        templates: Template sources overriding bundled partials by name
            ('index', 'schema', 'type', 'enum', 'documents', 'selection_set',
            'fragments')
        template_dir: Directory with template files overriding bundled ones
        out_file: Name of the generated file
        options: Free-form values exposed to templates as ``config.<key>``
    """
    immutable_types: bool = False
    avoid_optionals: bool = False
    enums_as_types: bool = False
    flatten_types: bool = True
    primitives: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PRIMITIVES))
    custom_helpers: dict[str, Callable[..., Any]] = field(default_factory=dict)
    templates: dict[str, str] = field(default_factory=dict)
    template_dir: str | None = None
    out_file: str = "types.ts"
    options: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneratorConfig":
        """Build a config from snake_case or camelCase keys.

        Unknown keys are kept in ``options``. A ``primitives`` mapping is
        merged over the default primitives.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        options: dict[str, Any] = dict(data.get("options", {}))
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name == "options":
                continue
            if name in known:
                kwargs[name] = value
            else:
                options[key] = value
        if "primitives" in kwargs:
            kwargs["primitives"] = {**DEFAULT_PRIMITIVES, **kwargs["primitives"]}
        return cls(options=options, **kwargs)

    @classmethod
    def load(cls, path: str | Path) -> "GeneratorConfig":
        """Read a JSON config file."""
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")
        return cls.from_dict(data)

    def merge(self, **overrides: Any) -> "GeneratorConfig":
        """Return a copy with the non-None overrides applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return GeneratorConfig(**values)

    def template_vars(self) -> dict[str, Any]:
        """The ``config`` mapping seen by templates."""
        values = {
            "immutable_types": self.immutable_types,
            "avoid_optionals": self.avoid_optionals,
            "enums_as_types": self.enums_as_types,
            "flatten_types": self.flatten_types,
            "primitives": self.primitives,
            "out_file": self.out_file,
        }
        values.update(self.options)
        return values
