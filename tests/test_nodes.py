import pytest

from xplr.nodes import MAX_STRING_LENGTH, Node, build_tree, dfs, make_node


def _sorted(nodes):
    return sorted(nodes, key=lambda n: n.key)


@pytest.mark.parametrize(
    "node, expected",
    [
        (Node(key="test", value="value"), "test: value"),
        (
            Node(
                key="parent",
                children=[Node(key="child1", value="value1"), Node(key="child2", value="value2")],
            ),
            "parent: {child1: value1 child2: value2}",
        ),
        (
            Node(
                key="root",
                children=[Node(key="level1", children=[Node(key="level2", value="value")])],
            ),
            "root: {level1: {level2: value}}",
        ),
        (Node(key="empty", children=[]), "empty"),
        (
            Node(key="long", value="a" * (MAX_STRING_LENGTH + 10)),
            "long: " + "a" * (MAX_STRING_LENGTH - 6) + "...",
        ),
    ],
)
def test_string(node, expected):
    assert str(node) == expected


@pytest.mark.parametrize(
    "node, expected",
    [
        (Node(key="test", value="value"), "value"),
        (
            Node(
                key="parent",
                children=[Node(key="child1", value="value1"), Node(key="child2", value="value2")],
            ),
            "value1 value2",
        ),
        (
            Node(
                key="root",
                children=[
                    Node(key="nonleaf", children=[Node(key="nested", value="value")]),
                    Node(key="leaf", value="leafvalue"),
                ],
            ),
            "value leafvalue",
        ),
        (
            Node(
                key="root",
                children=[Node(key="level1", children=[Node(key="level2", children=[])])],
            ),
            "",
        ),
        (
            Node(key="long", value="a" * (MAX_STRING_LENGTH + 10)),
            "a" * MAX_STRING_LENGTH + "...",
        ),
    ],
)
def test_short_string(node, expected):
    assert node.short_string() == expected


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("test", "hello", Node(key="test", value="hello", expand=True)),
        ("number", 42, Node(key="number", value="42", expand=True)),
        ("float", 3.14, Node(key="float", value="3.14", expand=True)),
        ("flag", True, Node(key="flag", value="true", expand=True)),
        (
            "array",
            ["a", "b", "c"],
            Node(
                key="array",
                value="a b c",
                expand=True,
                children=[
                    Node(key="0", value="a", expand=True),
                    Node(key="1", value="b", expand=True),
                    Node(key="2", value="c", expand=True),
                ],
            ),
        ),
    ],
)
def test_make_node(key, value, expected):
    node = make_node(key, value, 0, 2)
    if node.children:
        node.children = _sorted(node.children)
    assert node == expected


def test_make_node_float_without_fraction():
    assert make_node("f", 2.0).value == "2"


def test_make_node_large_float_has_no_exponent():
    assert make_node("f", 1e20).value == "100000000000000000000"


def test_make_node_unknown_type_has_empty_value():
    node = make_node("n", None)
    assert node.value == ""
    assert node.children is None


def test_make_node_expand_depends_on_layer():
    node = make_node("root", {"inner": {"deep": 1}}, 0, 1)
    assert node.expand is True
    assert node.children[0].expand is False
    assert node.children[0].children[0].expand is False


@pytest.mark.parametrize(
    "data, expected",
    [
        (
            {"string": "value", "int": 42, "float": 3.14, "bool": True},
            [
                Node(key="bool", value="true", expand=True),
                Node(key="float", value="3.14", expand=True),
                Node(key="int", value="42", expand=True),
                Node(key="string", value="value", expand=True),
            ],
        ),
        (
            {"numbers": [1, 2, 3], "mixed": ["a", 1, True]},
            [
                Node(
                    key="mixed",
                    value="a 1 true",
                    expand=True,
                    children=[
                        Node(key="0", value="a", expand=True),
                        Node(key="1", value="1", expand=True),
                        Node(key="2", value="true", expand=True),
                    ],
                ),
                Node(
                    key="numbers",
                    value="1 2 3",
                    expand=True,
                    children=[
                        Node(key="0", value="1", expand=True),
                        Node(key="1", value="2", expand=True),
                        Node(key="2", value="3", expand=True),
                    ],
                ),
            ],
        ),
        ({}, []),
    ],
)
def test_build_tree(data, expected):
    assert _sorted(build_tree(data, 2)) == expected


def test_build_tree_nested_mapping_value():
    (node,) = build_tree({"outer": {"a": "x", "b": "y"}}, 0)
    assert node.value == "x y"
    assert node.expand is False
    assert [child.key for child in node.children] == ["a", "b"]


def test_equal_ignores_none_versus_empty_children():
    assert Node(key="k", children=[]) == Node(key="k")


def test_dfs():
    root = Node(
        key="foo",
        expand=True,
        children=[
            Node(key="bar", expand=True, children=[Node(key="baz")]),
            Node(key="bad", expand=False, children=[Node(key="unreached")]),
        ],
    )
    visited = []
    dfs([root], lambda node, layer: visited.append((node.key, layer)), 0)
    assert visited == [("foo", 0), ("bar", 1), ("baz", 2), ("bad", 1)]


def test_dfs_propagates_errors():
    def visit(node, layer):
        if node.key == "b":
            raise RuntimeError("stop")

    with pytest.raises(RuntimeError):
        dfs([Node(key="a"), Node(key="b")], visit)