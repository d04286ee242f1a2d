#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for AST transformation utilities."""
import copy

import pytest

from clausemark.ast import (
    AnnotatedNodeVisitor,
    BlockQuote,
    Clause,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HtmlInline,
    Image,
    Item,
    LineBreak,
    Link,
    List,
    NodeCollector,
    NodeTransformer,
    Paragraph,
    Strong,
    TagInfo,
    Text,
    ThematicBreak,
    Variable,
    clone_node,
    extract_nodes,
)


def _plain_document() -> Document:
    return Document(
        children=[
            Heading(level=1, children=[Text(text="Title")]),
            Paragraph(
                children=[
                    Emphasis(children=[Text(text="em")]),
                    Strong(children=[Text(text="strong")]),
                    Link(destination="https://example.com", children=[Text(text="link")], title="T"),
                    Image(destination="img.png", children=[Text(text="alt")]),
                    LineBreak(soft=True),
                    HtmlInline(
                        text='<variable id="x" value="1"/>',
                        tag=TagInfo(tag_name="variable", attribute_string='id="x" value="1"', content="", closed=True),
                    ),
                ]
            ),
            BlockQuote(children=[Paragraph(children=[Text(text="quote")])]),
            List(type="ordered", start=3, delimiter="paren", children=[Item(children=[Paragraph()])]),
            CodeBlock(text="code\n", info="python"),
            ThematicBreak(),
        ]
    )


@pytest.mark.unit
class TestCloneNode:
    """Test node cloning."""

    def test_clone_simple_node(self) -> None:
        """Test cloning a simple text node."""
        original = Text(text="Hello")
        cloned = clone_node(original)

        assert cloned is not original
        assert cloned == original

    def test_clone_document(self) -> None:
        """Test cloning a complex document."""
        original = _plain_document()
        cloned = clone_node(original)

        assert cloned == original
        assert cloned.children[0] is not original.children[0]


@pytest.mark.unit
class TestExtractNodes:
    """Test node extraction."""

    def test_extract_by_type(self) -> None:
        """Test extracting nodes of one kind."""
        headings = extract_nodes(_plain_document(), Heading)

        assert len(headings) == 1
        assert headings[0].level == 1

    def test_extract_all_nodes(self) -> None:
        """Test extracting every node in pre-order."""
        doc = Document(children=[Paragraph(children=[Text(text="a"), Text(text="b")])])
        nodes = extract_nodes(doc)

        assert [type(n).__name__ for n in nodes] == ["Document", "Paragraph", "Text", "Text"]

    def test_extract_annotated_nodes(self) -> None:
        """Test annotated nodes nested in clauses are found."""
        doc = Document(
            children=[
                Clause(
                    src="s",
                    clauseid="outer",
                    children=[
                        Paragraph(children=[Variable(id="a", value="1")]),
                        Clause(src="s", clauseid="inner", children=[Paragraph(children=[Variable(id="b", value="2")])]),
                    ],
                )
            ]
        )

        assert [v.id for v in extract_nodes(doc, Variable)] == ["a", "b"]
        assert [c.clauseid for c in extract_nodes(doc, Clause)] == ["outer", "inner"]

    def test_collector_with_predicate(self) -> None:
        """Test the collector applies its predicate."""
        collector = NodeCollector(predicate=lambda n: isinstance(n, Text) and n.text.startswith("s"))
        _plain_document().accept(collector)

        assert [n.text for n in collector.collected] == ["strong"]


@pytest.mark.unit
class TestNodeTransformer:
    """Test the base transformer."""

    def test_identity_transform_builds_equal_tree(self) -> None:
        """Test the base transformer rebuilds an equal but distinct tree."""
        doc = _plain_document()
        result = NodeTransformer().transform(doc)

        assert result == doc
        assert result is not doc
        assert result.children[1] is not doc.children[1]
        assert result.children[1].children[5].tag is not doc.children[1].children[5].tag

    def test_input_not_mutated(self) -> None:
        """Test transforming leaves the input untouched."""

        class UppercaseTransformer(NodeTransformer):
            def visit_text(self, node):
                return Text(text=node.text.upper())

        doc = _plain_document()
        snapshot = copy.deepcopy(doc)
        result = UppercaseTransformer().transform(doc)

        assert doc == snapshot
        assert result.children[0].children[0].text == "TITLE"

    def test_empty_children_not_shared(self) -> None:
        """Test containers without children get a fresh children list."""
        doc = Document(children=[Paragraph(children=[Emphasis()]), Clause(src="s", clauseid="c")])
        result = NodeTransformer().transform(doc)

        result.children[0].children[0].children.append(Text(text="x"))
        result.children[1].children.append(Paragraph())

        assert doc.children[0].children[0].children == []
        assert doc.children[1].children == []

    def test_remove_nodes(self) -> None:
        """Test returning None removes a node."""

        class DropBreaks(NodeTransformer):
            def visit_thematic_break(self, node):
                return None

        result = DropBreaks().transform(_plain_document())
        assert not any(isinstance(child, ThematicBreak) for child in result.children)

    def test_annotated_nodes_pass_through(self) -> None:
        """Test annotated nodes are copied with transformed children."""

        class UppercaseTransformer(NodeTransformer):
            def visit_text(self, node):
                return Text(text=node.text.upper())

        clause = Clause(src="s", clauseid="c", children=[Paragraph(children=[Text(text="body")])])
        result = UppercaseTransformer().transform(clause)

        assert isinstance(result, Clause)
        assert result.clauseid == "c"
        assert result.children[0].children[0].text == "BODY"
        assert clause.children[0].children[0].text == "body"


@pytest.mark.unit
class TestAnnotatedNodeVisitor:
    """Test the exhaustive annotated visitor base."""

    def test_missing_kind_prevents_instantiation(self) -> None:
        """Test a visitor that skips a semantic kind cannot be created."""

        class ClauseOnly(NodeTransformer, AnnotatedNodeVisitor):
            def visit_clause(self, node):
                return node

        with pytest.raises(TypeError):
            ClauseOnly()

    def test_complete_visitor_instantiates(self) -> None:
        """Test a visitor handling every semantic kind can be created."""

        class Complete(NodeTransformer, AnnotatedNodeVisitor):
            def visit_clause(self, node):
                return node

            def visit_list_variable(self, node):
                return node

            def visit_variable(self, node):
                return node

            def visit_computed_variable(self, node):
                return node

            def visit_conditional_variable(self, node):
                return node

        assert isinstance(Complete(), AnnotatedNodeVisitor)
