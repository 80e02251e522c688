"""
Grammar tables shared by the tree-sitter JavaScript and TypeScript grammars.

These map raw tree-sitter node types onto ``NodeKind`` and describe which
grammar scaffolding is flattened or unwrapped when building a syntax tree.
"""

from doc_breadcrumbs.core import NodeKind

COMMENT_TYPES = frozenset({"comment"})

KIND_BY_TYPE: dict[str, NodeKind] = {
    "program": NodeKind.MODULE,
    # Variable statements
    "lexical_declaration": NodeKind.VARIABLE_STATEMENT,
    "variable_declaration": NodeKind.VARIABLE_STATEMENT,
    "variable_declarator": NodeKind.VARIABLE_DECLARATOR,
    # Types (TypeScript only)
    "interface_declaration": NodeKind.INTERFACE,
    "type_alias_declaration": NodeKind.TYPE_ALIAS,
    "object_type": NodeKind.TYPE_LITERAL,
    "enum_declaration": NodeKind.ENUM,
    # Classes and objects
    "class_declaration": NodeKind.CLASS,
    "abstract_class_declaration": NodeKind.CLASS,
    "class": NodeKind.CLASS,
    "object": NodeKind.OBJECT_LITERAL,
    # Members
    "method_definition": NodeKind.METHOD,
    "method_signature": NodeKind.METHOD,
    "abstract_method_signature": NodeKind.METHOD,
    "property_signature": NodeKind.PROPERTY,
    "public_field_definition": NodeKind.PROPERTY,
    "field_definition": NodeKind.PROPERTY,
    "pair": NodeKind.PROPERTY,
    "shorthand_property_identifier": NodeKind.PROPERTY,
    "required_parameter": NodeKind.PARAMETER,
    "optional_parameter": NodeKind.PARAMETER,
    # Functions
    "function_declaration": NodeKind.FUNCTION,
    "generator_function_declaration": NodeKind.FUNCTION,
    "function_signature": NodeKind.FUNCTION,
    "function_expression": NodeKind.FUNCTION,
    "function": NodeKind.FUNCTION,
    "generator_function": NodeKind.FUNCTION,
    "arrow_function": NodeKind.FUNCTION,
}

# Method-like types refined into constructor/accessor kinds
METHOD_TYPES = frozenset({"method_definition", "method_signature", "abstract_method_signature"})
ACCESSOR_KEYWORDS = frozenset({"get", "set"})
CONSTRUCTOR_NAME = "constructor"

# Types that bind a name through a field other than "name"
NAME_FIELDS: dict[str, str] = {
    "pair": "key",
    "field_definition": "property",
    "required_parameter": "pattern",
    "optional_parameter": "pattern",
    "assignment_pattern": "left",
}

# Leaf types that count as simple identifiers
IDENTIFIER_TYPES = frozenset({
    "identifier",
    "type_identifier",
    "property_identifier",
    "private_property_identifier",
    "shorthand_property_identifier",
})

# Bodies and lists spliced into their owner; the value is the kind forced
# onto each of their named children, if any
TRANSPARENT_TYPES: dict[str, NodeKind | None] = {
    "class_body": None,
    "interface_body": None,
    "enum_body": NodeKind.ENUM_MEMBER,
    "formal_parameters": NodeKind.PARAMETER,
}

# Nodes that sit between a doc comment and the declaration it documents
PASS_THROUGH_TYPES = frozenset({"decorator"})

# Wrappers replaced by the declaration they wrap
EXPORT_WRAPPER = "export_statement"
AMBIENT_WRAPPER = "ambient_declaration"
EXPRESSION_WRAPPER = "expression_statement"
NAMESPACE_TYPES = frozenset({"internal_module", "module"})
DECLARATION_TYPES = frozenset(
    {grammar_type for grammar_type, kind in KIND_BY_TYPE.items() if kind != NodeKind.OTHER}
) | NAMESPACE_TYPES


def is_doc_comment(text: str) -> bool:
    """True for ``/** ... */`` block comments (but not the empty ``/**/``)."""
    return text.startswith("/**") and not text.startswith("/**/")
