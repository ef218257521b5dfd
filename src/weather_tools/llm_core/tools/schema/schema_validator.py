from typing import Any, Dict, Set

from ...exceptions import ToolValidationError
from ...logger import get_logger

logger = get_logger(__name__)

_METADATA_KEYS = ("$defs", "$schema", "$id", "title", "definitions")


class SchemaValidator:
    """Checks and cleans the JSON schemas generated for tool parameters."""

    @staticmethod
    def assert_no_recursive_refs(schema: Dict[str, Any]) -> None:
        """Rejects schemas whose ``$ref`` graph contains a cycle.

        Raises:
            ToolValidationError: If a recursive reference is found.
        """
        defs = schema.get("$defs") or schema.get("definitions") or {}

        def walk(node: Any, seen: Set[str]) -> None:
            if isinstance(node, list):
                for item in node:
                    walk(item, seen)
                return
            if not isinstance(node, dict):
                return

            ref = node.get("$ref")
            if ref is None:
                for value in node.values():
                    walk(value, seen)
                return

            if ref in seen:
                msg = f"Recursive structure detected: {ref}. Tool parameters must not be recursive."
                logger.error(msg)
                raise ToolValidationError(msg)

            # e.g. #/$defs/Location
            def_name = ref.rsplit("/", 1)[-1]
            if ref.startswith("#") and def_name in defs:
                walk(defs[def_name], seen | {ref})

        walk(schema, set())

    @staticmethod
    def sanitize_schema(schema: Any) -> Any:
        """Strips generator metadata and closes object schemas.

        Removes ``$defs``, ``$schema``, ``$id``, ``title`` and ``definitions``, and sets
        ``additionalProperties: false`` on every object that does not declare it.
        Property names are never touched, even a property called ``title``.

        Args:
            schema: The JSON schema to sanitize.

        Returns:
            The sanitized copy of the schema.
        """
        if not isinstance(schema, dict):
            return schema

        cleaned: Dict[str, Any] = {}
        for key, value in schema.items():
            if key in _METADATA_KEYS:
                continue
            if key == "properties" and isinstance(value, dict):
                cleaned[key] = {name: SchemaValidator.sanitize_schema(prop) for name, prop in value.items()}
            elif isinstance(value, dict):
                cleaned[key] = SchemaValidator.sanitize_schema(value)
            elif isinstance(value, list):
                cleaned[key] = [SchemaValidator.sanitize_schema(item) for item in value]
            else:
                cleaned[key] = value

        if cleaned.get("type") == "object":
            cleaned.setdefault("additionalProperties", False)

        return cleaned
