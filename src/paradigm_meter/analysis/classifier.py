"""OOP/FP construct classifier over tree-sitter TypeScript trees.

OOP constructs: class declarations and expressions, plus the methods,
constructors, getters and setters that belong to them.
FP constructs: function declarations, and function or arrow expressions
that are not lexically inside a class.

Everything inside a class counts as part of that class. Function and arrow
expressions found there (method bodies, field initializers, static blocks)
are dropped from every bucket.
"""

from __future__ import annotations

from typing import Any

from .models import Counts

CLASS_KINDS = frozenset({"class_declaration", "abstract_class_declaration", "class"})

METHOD_KINDS = frozenset({"method_definition", "abstract_method_signature"})

# Overload signatures inside a class body. The same node kind is used for
# interface and object-type members, which are not methods.
METHOD_SIGNATURE_KIND = "method_signature"

# Free function declarations, overload signatures and `declare function`.
FUNCTION_DECLARATION_KINDS = frozenset(
    {"function_declaration", "generator_function_declaration", "function_signature"}
)

# Older grammars name function expressions `function`.
FUNCTION_EXPRESSION_KINDS = frozenset({"function_expression", "function", "generator_function"})

ARROW_KIND = "arrow_function"

DECORATOR_KIND = "decorator"


def _is_method(node: Any, in_class: bool) -> bool:
    if not in_class:
        return False
    if node.type in METHOD_KINDS:
        return True
    return (
        node.type == METHOD_SIGNATURE_KIND
        and node.parent is not None
        and node.parent.type == "class_body"
    )


def classify(tree: Any) -> Counts:
    """Count OOP and FP constructs in a syntax tree.

    Args:
        tree: A tree-sitter ``Tree`` or any ``Node`` to start from

    Returns:
        Fresh counts for the subtree; the tree itself is not modified
    """
    counts = Counts()
    if tree is None:
        return counts
    root = getattr(tree, "root_node", tree)

    # Each frame carries its own copy of the in-class flag.
    stack: list[tuple[Any, bool]] = [(root, False)]
    while stack:
        node, in_class = stack.pop()
        kind = node.type

        if node.is_named:
            if kind in CLASS_KINDS:
                counts.classes += 1
                for child in node.named_children:
                    # Decorators sit in front of the class body.
                    stack.append((child, in_class if child.type == DECORATOR_KIND else True))
                continue
            if _is_method(node, in_class):
                counts.methods += 1
            elif kind in FUNCTION_DECLARATION_KINDS:
                counts.functions += 1
            elif kind in FUNCTION_EXPRESSION_KINDS:
                if not in_class:
                    counts.functions += 1
            elif kind == ARROW_KIND:
                if not in_class:
                    counts.arrow_functions += 1

        for child in node.named_children:
            stack.append((child, in_class))

    return counts
