"""Tests for the OOP/FP construct classifier."""

import pytest

from paradigm_meter.analysis.classifier import classify
from paradigm_meter.analysis.models import Counts
from paradigm_meter.scanning.dialects import ParseDialect


class TestOopConstructs:
    """Classes and their members land in the OOP buckets."""

    def test_method_getter_setter(self, count):
        """One class with a method, a getter and a setter."""
        code = """
class Shape {
  area(): number { return 0; }
  get name(): string { return "shape"; }
  set name(value: string) {}
}
"""
        assert count(code) == Counts(classes=1, methods=3)

    def test_constructor_counts_as_method(self, count):
        code = """
class Point {
  constructor(public x: number, public y: number) {}
}
"""
        assert count(code) == Counts(classes=1, methods=1)

    def test_class_expression_same_as_declaration(self, count):
        """A class assigned to a variable is still a class."""
        code = """
const Point = class {
  constructor(public x: number) {}
  norm() { return this.x; }
};
"""
        assert count(code) == Counts(classes=1, methods=2)

    def test_anonymous_class_passed_as_argument(self, count):
        code = "register(class { run() {} });"
        assert count(code) == Counts(classes=1, methods=1)

    def test_nested_classes_each_counted(self, count):
        code = """
class Outer {
  make() {
    return class Inner {
      go() {}
    };
  }
}
"""
        assert count(code) == Counts(classes=2, methods=2)

    def test_abstract_class_and_abstract_method(self, count):
        code = """
abstract class Base {
  abstract run(): void;
  describe() { return "base"; }
}
"""
        assert count(code) == Counts(classes=1, methods=2)

    def test_overload_signatures_in_class(self, count):
        """Each overload signature of a method is a method."""
        code = """
class Parser {
  parse(x: string): string;
  parse(x: number): number;
  parse(x: any) { return x; }
}
"""
        assert count(code) == Counts(classes=1, methods=3)

    def test_static_method(self, count):
        code = "class Factory { static create() { return new Factory(); } }"
        assert count(code) == Counts(classes=1, methods=1)


class TestFpConstructs:
    """Free functions and arrows land in the FP buckets."""

    def test_function_and_arrow(self, count):
        code = """
function add(a: number, b: number) { return a + b; }
const double = (x: number) => x * 2;
"""
        assert count(code) == Counts(functions=1, arrow_functions=1)

    def test_function_expression(self, count):
        code = "const legacy = function () { return 1; };"
        assert count(code) == Counts(functions=1)

    def test_generators(self, count):
        code = """
function* ids() { yield 1; }
const more = function* () { yield 2; };
"""
        assert count(code) == Counts(functions=2)

    def test_function_overload_signatures(self, count):
        code = """
function pick(x: string): string;
function pick(x: number): number;
function pick(x: any) { return x; }
"""
        assert count(code) == Counts(functions=3)

    def test_nested_arrows_all_counted(self, count):
        code = "const curry = (a: number) => (b: number) => (c: number) => a + b + c;"
        assert count(code) == Counts(arrow_functions=3)

    def test_object_literal_methods_are_not_methods(self, count):
        """Object literal methods outside a class count toward nothing."""
        code = """
const api = {
  get() { return 1; },
  load: () => 2,
};
"""
        assert count(code) == Counts(arrow_functions=1)

    def test_interface_signatures_ignored(self, count):
        code = """
interface Repo {
  find(id: string): void;
  save: (item: string) => void;
}
"""
        assert count(code) == Counts()


class TestInClassSuppression:
    """Function-like nodes inside a class belong to the class."""

    def test_inner_arrow_and_function_expression_dropped(self, count):
        code = """
class Service {
  run() {
    const inner = () => 1;
    const legacy = function () { return 2; };
    return inner() + legacy();
  }
}
"""
        assert count(code) == Counts(classes=1, methods=1)

    def test_field_initializer_arrow_dropped(self, count):
        code = """
class Button {
  onClick = () => this.press();
  press() {}
}
"""
        assert count(code) == Counts(classes=1, methods=1)

    def test_static_block_is_inside_class(self, count):
        code = """
class Registry {
  static {
    const boot = () => 1;
    boot();
  }
}
"""
        assert count(code) == Counts(classes=1)

    def test_function_declaration_inside_method_still_counted(self, count):
        """Function declarations are counted regardless of nesting."""
        code = """
class Worker {
  work() {
    function helper() { return 1; }
    return helper();
  }
}
"""
        assert count(code) == Counts(classes=1, methods=1, functions=1)

    def test_object_method_inside_class_counts_as_method(self, count):
        code = """
class Store {
  snapshot() {
    return { get size() { return 0; } };
  }
}
"""
        assert count(code) == Counts(classes=1, methods=2)

    def test_decorator_arguments_are_outside_class(self, count):
        code = """
@Component({ factory: () => new Thing() })
class Widget {}
"""
        assert count(code) == Counts(classes=1, arrow_functions=1)

    def test_code_after_class_is_outside(self, count):
        code = """
class A { m() { const x = () => 1; } }
const after = () => 2;
"""
        assert count(code) == Counts(classes=1, methods=1, arrow_functions=1)


class TestTsxDialect:
    """JSX-embedding sources parse with the TSX grammar."""

    def test_component_arrows(self, count):
        code = """
export const List = ({ items }: { items: string[] }) => (
  <ul>{items.map((item) => <li key={item}>{item}</li>)}</ul>
);
"""
        assert count(code, ParseDialect.TSX) == Counts(arrow_functions=2)

    def test_class_component(self, count):
        code = """
class Hello extends React.Component<{ name: string }> {
  render() {
    return <button onClick={() => this.setState({})}>{this.props.name}</button>;
  }
}
"""
        assert count(code, ParseDialect.TSX) == Counts(classes=1, methods=1)


class TestClassifierProperties:
    """Determinism and traversal guarantees."""

    MIXED = """
class Repo {
  constructor() {}
  find() { return [1].map((x) => x); }
}
function helper() { return () => 1; }
const cb = function () {};
const Anon = class { get id() { return 1; } };
"""

    def test_idempotent(self, parse):
        """Classifying the same tree twice gives the same counts."""
        tree = parse(self.MIXED)
        first = classify(tree)
        second = classify(tree)
        assert first == second
        assert first == Counts(classes=2, methods=3, functions=2, arrow_functions=1)

    def test_counts_add_up_across_statements(self, parse):
        """Counting statements one by one matches counting the whole file."""
        tree = parse(self.MIXED)
        total = Counts()
        for child in tree.root_node.named_children:
            total.merge(classify(child))
        assert total == classify(tree)

    def test_statement_order_does_not_matter(self, parse):
        """Reordering top-level statements leaves the counts unchanged."""
        tree = parse(self.MIXED)
        source = self.MIXED.encode("utf-8")
        statements = [
            source[child.start_byte : child.end_byte].decode("utf-8")
            for child in tree.root_node.named_children
        ]
        reordered = parse("\n".join(reversed(statements)))
        assert classify(reordered) == classify(tree)

    def test_accepts_root_node(self, parse):
        tree = parse(self.MIXED)
        assert classify(tree.root_node) == classify(tree)

    def test_none_gives_zero_counts(self):
        assert classify(None) == Counts()

    def test_empty_source(self, count):
        assert count("") == Counts()

    def test_deep_nesting_does_not_recurse(self, count):
        """Nesting deeper than the interpreter recursion limit is fine."""
        depth = 1500
        code = "const f = " + "() => " * depth + "0;"
        assert count(code) == Counts(arrow_functions=depth)

    @pytest.mark.parametrize(
        "code",
        [
            "class Broken { method( { }",
            "function (((",
            "const x = => ;",
        ],
    )
    def test_syntax_errors_do_not_raise(self, count, code):
        result = count(code)
        assert isinstance(result, Counts)
        assert result.classes >= 0 and result.functions >= 0
