import pytest

from structlab.notation import (
    build_tree,
    infix_order,
    is_operator,
    postfix_order,
    prefix_order,
    priority,
    reverse_expression,
    to_postfix,
    to_prefix,
)

EXPRESSIONS = ["a+b*c", "(a+b)*(c-d)", "a*(b+c)/d", "x^y*z", "(p+q)^r"]


def test_priority_ordering():
    assert priority("^") > priority("*")
    assert priority("*") == priority("/")
    assert priority("/") > priority("+")
    assert priority("+") == priority("-")


@pytest.mark.parametrize("char", list("+-*/^"))
def test_is_operator_true(char):
    assert is_operator(char) is True


@pytest.mark.parametrize("char", list("a1() "))
def test_is_operator_false(char):
    assert is_operator(char) is False


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_reverse_expression_is_involution(expression):
    assert reverse_expression(reverse_expression(expression)) == expression


def test_reverse_expression_swaps_parentheses():
    result = reverse_expression("((a+b)")
    assert result.count(")") == 2
    assert result.count("(") == 1
    assert result.startswith("(")


def test_postfix_precedence():
    assert to_postfix("a+b*c") == "abc*+"


def test_postfix_left_associative():
    assert to_postfix("a-b-c") == "ab-c-"


def test_prefix_precedence():
    assert to_prefix("a+b*c") == "+a*bc"


def test_postfix_ignores_spaces():
    assert to_postfix("a + b * c") == to_postfix("a+b*c")


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_postfix_keeps_symbols(expression):
    result = to_postfix(expression)
    assert sorted(result) == sorted(c for c in expression if c not in "() ")
    assert "(" not in result and ")" not in result


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_tree_round_trips_postfix(expression):
    postfix = to_postfix(expression)
    assert postfix_order(build_tree(postfix)) == postfix


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_tree_infix_drops_parentheses(expression):
    tree = build_tree(to_postfix(expression))
    assert infix_order(tree) == "".join(c for c in expression if c not in "() ")


@pytest.mark.parametrize("expression", ["a+b*c", "(a+b)*(c-d)", "(p+q)^r"])
def test_tree_prefix_matches_to_prefix(expression):
    tree = build_tree(to_postfix(expression))
    assert prefix_order(tree) == to_prefix(expression)


def test_tree_structure():
    tree = build_tree(to_postfix("a+b*c"))
    assert tree.data == "+"
    assert tree.left.data == "a"
    assert tree.right.data == "*"
    assert (tree.right.left.data, tree.right.right.data) == ("b", "c")


def test_single_operand_tree():
    tree = build_tree("x")
    assert prefix_order(tree) == "x"
    assert tree.left is None and tree.right is None


def test_empty_traversals():
    assert prefix_order(None) == ""
    assert infix_order(None) == ""
    assert postfix_order(None) == ""


def test_build_tree_missing_operand():
    with pytest.raises(ValueError):
        build_tree("a+")


def test_build_tree_empty():
    with pytest.raises(ValueError):
        build_tree("")