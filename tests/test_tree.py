"""Tests for the generic tree query layer."""

from codetally.tree import SyntaxNode, find_all, find_first, node_text


def _leaf(kind, label=None):
    node = SyntaxNode(kind)
    node.label = label
    return node


class TestFindAll:
    def test_none_root_is_noop(self):
        assert find_all(None, "block") == []
        assert find_first(None, "block") is None

    def test_preorder_parent_before_children(self):
        inner = SyntaxNode("block")
        outer = SyntaxNode("block", children={"body": inner})
        assert find_all(outer, "block") == [outer, inner]

    def test_slots_visited_in_insertion_order(self):
        a, b, c = _leaf("x", "a"), _leaf("x", "b"), _leaf("x", "c")
        root = SyntaxNode("root", children={"second": [b, c], "first": a})
        # Slot insertion order wins, not slot name order.
        assert [n.label for n in find_all(root, "x")] == ["b", "c", "a"]

    def test_nested_matches_are_not_deduplicated(self):
        nested = SyntaxNode("classDeclaration")
        body = SyntaxNode("classBody", children={"members": [nested]})
        outer = SyntaxNode("classDeclaration", children={"body": body})
        root = SyntaxNode("compilationUnit", children={"types": [outer]})

        found = find_all(root, "classDeclaration")
        assert found == [outer, nested]
        assert found[0] is outer and found[1] is nested

    def test_depth_first_within_sequences(self):
        deep = _leaf("x", "deep")
        first = SyntaxNode("wrap", children={"inner": [deep]})
        second = _leaf("x", "second")
        root = SyntaxNode("root", children={"items": [first, second]})
        assert [n.label for n in find_all(root, "x")] == ["deep", "second"]

    def test_deep_tree_does_not_hit_recursion_limit(self):
        node = SyntaxNode("leaf")
        for _ in range(5000):
            node = SyntaxNode("wrap", children={"child": node})
        assert len(find_all(node, "leaf")) == 1


class TestFindFirst:
    def test_returns_first_preorder_match(self):
        a, b = _leaf("Identifier", "a"), _leaf("Identifier", "b")
        root = SyntaxNode(
            "root",
            children={"head": SyntaxNode("wrap", children={"x": a}), "tail": b},
        )
        assert find_first(root, "Identifier") is a

    def test_missing_kind(self):
        assert find_first(SyntaxNode("root"), "Identifier") is None


class TestNodeText:
    def test_inclusive_end(self):
        text = "class Foo {}"
        assert node_text(text, SyntaxNode("Identifier", (6, 8))) == "Foo"

    def test_no_span(self):
        assert node_text("abc", SyntaxNode("Identifier")) == ""
        assert node_text("abc", None) == ""


class TestFromCst:
    def test_rule_nodes_and_tokens(self):
        cst = {
            "name": "compilationUnit",
            "location": {"startOffset": 0, "endOffset": 11},
            "children": {
                "classDeclaration": [
                    {
                        "name": "classDeclaration",
                        "location": {"startOffset": 0, "endOffset": 11},
                        "children": {
                            "Identifier": [
                                {
                                    "image": "Foo",
                                    "startOffset": 6,
                                    "endOffset": 8,
                                    "tokenType": {"name": "Identifier"},
                                }
                            ]
                        },
                    }
                ]
            },
        }
        root = SyntaxNode.from_cst(cst)

        assert root.kind == "compilationUnit"
        assert root.span == (0, 11)
        cls = find_first(root, "classDeclaration")
        ident = find_first(cls, "Identifier")
        assert ident.span == (6, 8)
        assert node_text("class Foo {}", ident) == "Foo"

    def test_missing_location_gives_no_span(self):
        root = SyntaxNode.from_cst({"name": "classBody", "children": {}})
        assert root.span is None
        assert root.children == {}
