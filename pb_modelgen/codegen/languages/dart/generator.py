"""
Dart model generator implementation.

Generates one Dart source unit per collection: enums for select fields,
then a model class with wire-name constants, a const constructor, a
``fromModel`` factory reading a PocketBase record and a ``toMap``
serializer. Every construct is rendered from its own template so each
fragment can be checked on its own.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, SchemaInconsistencyError
from ...core.naming import NameScope, to_member_name, to_type_name
from ...core.schema import SYSTEM_FIELD_NAMES, CollectionSchema, FieldType, SchemaField
from .naming import (
    DART_BUILTIN_TYPES,
    ENUM_RESERVED_MEMBERS,
    MODEL_RESERVED_MEMBERS,
    identifier_problem,
)
from .types import DartTypeMapper, TypeDescriptor

logger = get_logger(__name__)

# id / created / updated, present on every record
FIXED_FIELDS = (
    ("id", TypeDescriptor("String")),
    ("created", TypeDescriptor("DateTime")),
    ("updated", TypeDescriptor("DateTime")),
)


class DartGenerator(CodeGenerator):
    """Code generator for Dart model classes."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Dart generator with configuration."""
        super().__init__(config)
        self.type_mapper = DartTypeMapper()

    @property
    def language_name(self) -> str:
        return "dart"

    def get_template_directory(self) -> Path:
        """Return the Dart templates directory."""
        return Path(__file__).parent / "templates"

    def class_name(self, collection: CollectionSchema) -> str:
        return f"{to_type_name(collection.name)}{self.config.class_suffix}"

    def generate_single_schema(self, collection: CollectionSchema) -> str:
        """Generate the complete Dart source for one collection."""
        model = self.build_model_data(collection)

        parts = [self.render_header(model)]
        parts.extend(self.render_enum(enum) for enum in model["enums"])
        parts.append(
            self.render_class(
                model,
                [
                    self.render_fields(model),
                    self.render_constructor(model),
                    self.render_factory(model),
                    self.render_to_map(model),
                ],
            )
        )

        logger.debug(
            "Rendered %s with %d fields and %d enums",
            model["class_name"],
            len(model["schema_fields"]),
            len(model["enums"]),
        )
        return "\n\n".join(parts) + "\n"

    # Fragment builders

    def _render(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.render_template(template_name, context).rstrip("\n")

    def render_header(self, model: Dict[str, Any]) -> str:
        """File header comment and imports."""
        return self._render(
            "header.dart.j2",
            {
                "add_comments": self.config.add_comments,
                "collection_name": model["collection_name"],
                "record_import": self.config.record_import,
            },
        )

    def render_enum(self, enum: Dict[str, Any]) -> str:
        """Enum declaration plus both lookup tables and the wire lookup."""
        return self._render("enum.dart.j2", {"enum": enum})

    def render_fields(self, model: Dict[str, Any]) -> str:
        """Field declarations, each followed by its wire-name constant."""
        return self._render("fields.dart.j2", {"fields": model["all_fields"]})

    def render_constructor(self, model: Dict[str, Any]) -> str:
        return self._render(
            "constructor.dart.j2",
            {"class_name": model["class_name"], "fields": model["all_fields"]},
        )

    def render_factory(self, model: Dict[str, Any]) -> str:
        """``fromModel`` factory reading a record."""
        return self._render(
            "factory.dart.j2",
            {
                "class_name": model["class_name"],
                "record_type": self.config.record_type,
                "fields": model["schema_fields"],
            },
        )

    def render_to_map(self, model: Dict[str, Any]) -> str:
        """``toMap`` serializer; id, created and updated are left out."""
        return self._render("to_map.dart.j2", {"fields": model["schema_fields"]})

    def render_class(self, model: Dict[str, Any], members: List[str]) -> str:
        return self._render(
            "class.dart.j2", {"class_name": model["class_name"], "members": members}
        )

    # Read / write expressions

    @staticmethod
    def read_expression(field_data: Dict[str, Any]) -> str:
        """Dart expression turning the record's wire value into the field value."""
        raw = f"r.data[{field_data['constant']}]"
        field_type = field_data["field_type"]
        nullable = field_data["descriptor"].nullable

        if field_type == FieldType.SELECT:
            lookup = f"{field_data['enum']['from_wire']}({raw})"
            if nullable:
                return f"{raw} == null || {raw} == '' ? null : {lookup}"
            return lookup
        if field_type == FieldType.DATE:
            if nullable:
                return f"{raw} != null ? DateTime.parse({raw}) : null"
            return f"DateTime.parse({raw})"
        return raw

    @staticmethod
    def write_expression(field_data: Dict[str, Any]) -> str:
        """Dart expression turning the field value back into its wire value."""
        member = field_data["member"]
        field_type = field_data["field_type"]

        if field_type == FieldType.SELECT:
            return f"{field_data['enum']['to_map']}[{member}]"
        if field_type == FieldType.DATE:
            if field_data["descriptor"].nullable:
                return f"{member}?.toIso8601String()"
            return f"{member}.toIso8601String()"
        return member

    # Model data and validation

    def build_model_data(self, collection: CollectionSchema) -> Dict[str, Any]:
        """
        Build the template context for a collection.

        Raises:
            SchemaInconsistencyError: If names are malformed or collide, or a
                select field has no usable values
        """
        if not isinstance(collection.name, str) or not collection.name:
            raise SchemaInconsistencyError("collection name is empty", str(collection.name))

        class_name = self.class_name(collection)
        problem = identifier_problem(class_name)
        if problem:
            raise SchemaInconsistencyError(
                f"class name {problem}", collection.name
            )

        top_scope = NameScope(f"file {collection.name}", {class_name: "model class"})
        reserved = {name: "built-in member" for name in MODEL_RESERVED_MEMBERS}
        reserved.update((name, "built-in type") for name in DART_BUILTIN_TYPES)
        reserved[self.config.record_type] = "the record type"
        class_scope = NameScope(f"class {class_name}", reserved)
        class_scope.claim(class_name, "constructor")

        all_fields = []
        for name, descriptor in FIXED_FIELDS:
            member, constant = to_member_name(name), to_type_name(name)
            class_scope.claim(member, f"built-in field '{name}'")
            class_scope.claim(constant, f"built-in field '{name}'")
            all_fields.append(
                {
                    "name": name,
                    "member": member,
                    "constant": constant,
                    "type": descriptor.render(),
                    "required": True,
                }
            )

        schema_fields = []
        enums = []
        for schema_field in collection.fields:
            field_data = self._build_field_data(
                collection, schema_field, class_scope, top_scope
            )
            if field_data.get("enum"):
                enums.append(field_data["enum"])
            schema_fields.append(field_data)
            all_fields.append(field_data)

        return {
            "collection_name": collection.name,
            "class_name": class_name,
            "all_fields": all_fields,
            "schema_fields": schema_fields,
            "enums": enums,
        }

    def _build_field_data(
        self,
        collection: CollectionSchema,
        schema_field: SchemaField,
        class_scope: NameScope,
        top_scope: NameScope,
    ) -> Dict[str, Any]:
        def fail(message: str):
            raise SchemaInconsistencyError(message, collection.name, schema_field.name)

        if not isinstance(schema_field.name, str) or not schema_field.name:
            fail("field name is empty")
        if schema_field.name in SYSTEM_FIELD_NAMES:
            fail("collides with the built-in record field of the same name")

        member = to_member_name(schema_field.name)
        constant = to_type_name(schema_field.name)
        for kind, identifier in (("member", member), ("constant", constant)):
            problem = identifier_problem(identifier)
            if problem:
                fail(f"{kind} name {problem}")
            owner = class_scope.claim(identifier, f"field '{schema_field.name}'")
            if owner:
                fail(f"{kind} name '{identifier}' collides with {owner}")

        descriptor = self.type_mapper.map_field(schema_field)
        field_data = {
            "name": schema_field.name,
            "member": member,
            "constant": constant,
            "descriptor": descriptor,
            "type": descriptor.render(),
            "required": schema_field.required,
            "field_type": schema_field.type,
        }

        if schema_field.type == FieldType.SELECT:
            field_data["enum"] = self._build_enum_data(
                collection,
                schema_field,
                member,
                descriptor.base_type,
                class_scope,
                top_scope,
            )

        field_data["read"] = self.read_expression(field_data)
        field_data["write"] = self.write_expression(field_data)
        return field_data

    def _build_enum_data(
        self,
        collection: CollectionSchema,
        schema_field: SchemaField,
        member: str,
        type_name: str,
        class_scope: NameScope,
        top_scope: NameScope,
    ) -> Dict[str, Any]:
        def fail(message: str):
            raise SchemaInconsistencyError(message, collection.name, schema_field.name)

        declared = schema_field.options.get("values")
        if declared is not None and not isinstance(declared, (list, tuple)):
            fail(f"select values must be a list, got {type(declared).__name__}")

        values = schema_field.select_values
        if not values:
            fail("select field declares no values")

        # The class body names the enum type, so it must not be shadowed there
        enum_owner = f"enum of field '{schema_field.name}'"
        for scope in (top_scope, class_scope):
            owner = scope.claim(type_name, enum_owner)
            if owner:
                fail(f"enum name '{type_name}' collides with {owner}")

        enum_scope = NameScope(
            f"enum {type_name}",
            {name: "built-in enum member" for name in ENUM_RESERVED_MEMBERS},
        )
        seen_values = set()
        variants = []
        for value in values:
            if not isinstance(value, str) or not value:
                fail(f"select value {value!r} is not a non-empty string")
            if value in seen_values:
                fail(f"select value '{value}' is declared more than once")
            seen_values.add(value)

            variant = to_member_name(value)
            problem = identifier_problem(variant)
            if problem:
                fail(f"select value '{value}': {problem}")
            owner = enum_scope.claim(variant, f"value '{value}'")
            if owner:
                fail(f"select value '{value}' maps to '{variant}', same as {owner}")
            variants.append({"name": variant, "value": value})

        return {
            "field_name": schema_field.name,
            "type_name": type_name,
            "to_map": f"_{member}EnumToMap",
            "from_map": f"_{member}EnumFromMap",
            "from_wire": f"_{member}EnumFromWire",
            "variants": variants,
        }
