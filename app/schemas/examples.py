"""
Canned schema/document pair behind the "load example" action.

The document satisfies the schema, so validating the pair unchanged passes;
editing ``age`` past 150 or dropping ``name`` shows the error list.
"""

import json

EXAMPLE_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "age": {"type": "number", "minimum": 0, "maximum": 150},
    },
    "required": ["name", "age"],
    "additionalProperties": False,
}

EXAMPLE_DATA: dict = {
    "name": "John Doe",
    "age": 30,
}


def example_texts() -> tuple[str, str]:
    """Return the pair as pretty-printed JSON text, ready to paste into the form."""
    return json.dumps(EXAMPLE_SCHEMA, indent=2), json.dumps(EXAMPLE_DATA, indent=2)
