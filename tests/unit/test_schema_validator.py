#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for record conversion and validation."""
import pytest

from clausemark.ast import (
    Attribute,
    CodeBlock,
    ConditionalVariable,
    Heading,
    List,
    Paragraph,
    TagInfo,
    Text,
)
from clausemark.exceptions import SchemaValidationError, UnknownKindError, ValidationError
from clausemark.schema import SchemaValidator

TEXT = "clausemark.plain.Text"
CODE_BLOCK = "clausemark.plain.CodeBlock"
HEADING = "clausemark.plain.Heading"
LIST = "clausemark.plain.List"
PARAGRAPH = "clausemark.plain.Paragraph"


@pytest.fixture
def validator() -> SchemaValidator:
    return SchemaValidator()


@pytest.mark.unit
class TestToDict:
    """Test dumping nodes to records."""

    def test_simple_node(self, validator) -> None:
        """Test dumping a text node."""
        assert validator.to_dict(Text(text="Hello")) == {"node_type": TEXT, "text": "Hello"}

    def test_optional_none_omitted(self, validator) -> None:
        """Test unset optional fields are left out."""
        assert validator.to_dict(CodeBlock(text="x")) == {"node_type": CODE_BLOCK, "text": "x"}

    def test_nested_tag(self, validator) -> None:
        """Test tag descriptors are dumped recursively."""
        block = CodeBlock(
            text="body\n",
            info="<list/>",
            tag=TagInfo(tag_name="list", attribute_string="", content="body", closed=False),
        )
        record = validator.to_dict(block)

        assert record["tag"] == {
            "node_type": "clausemark.plain.TagInfo",
            "tagName": "list",
            "attributeString": "",
            "content": "body",
            "closed": False,
            "attributes": [],
        }

    def test_camel_case_keys(self, validator) -> None:
        """Test annotated fields use their serialized names."""
        record = validator.to_dict(ConditionalVariable(id="c", value="v", when_true="y", when_false="n"))

        assert record["whenTrue"] == "y"
        assert record["whenFalse"] == "n"
        assert "when_true" not in record

    def test_unregistered_node(self, validator) -> None:
        """Test dumping an unknown object raises UnknownKindError."""
        with pytest.raises(UnknownKindError):
            validator.to_dict(object())


@pytest.mark.unit
class TestFromDict:
    """Test building nodes from records."""

    def test_simple_record(self, validator) -> None:
        """Test loading a text record."""
        assert validator.from_dict({"node_type": TEXT, "text": "Hello"}) == Text(text="Hello")

    def test_optional_fields_use_defaults(self, validator) -> None:
        """Test absent optional fields take node defaults."""
        node = validator.from_dict({"node_type": LIST, "type": "bullet"})

        assert node == List(type="bullet")
        assert node.tight is True
        assert node.children == []

    def test_nested_records(self, validator) -> None:
        """Test nested nodes and tags are built with their concrete classes."""
        node = validator.from_dict(
            {
                "node_type": CODE_BLOCK,
                "text": "x\n",
                "tag": {
                    "node_type": "clausemark.plain.TagInfo",
                    "tagName": "clause",
                    "attributeString": 'src="s" clauseid="c"',
                    "content": "x",
                    "closed": False,
                    "attributes": [
                        {"node_type": "clausemark.plain.Attribute", "name": "src", "value": "s"},
                        {"node_type": "clausemark.plain.Attribute", "name": "clauseid", "value": "c"},
                    ],
                },
            }
        )

        assert isinstance(node, CodeBlock)
        assert node.tag.attributes == [Attribute(name="src", value="s"), Attribute(name="clauseid", value="c")]

    def test_round_trip(self, validator) -> None:
        """Test dumping and loading gives an equal node."""
        node = Paragraph(children=[Text(text="a"), Heading(level=2, children=[Text(text="b")])])
        assert validator.from_dict(validator.to_dict(node)) == node

    def test_not_a_record(self, validator) -> None:
        """Test non-dict input is rejected."""
        with pytest.raises(SchemaValidationError):
            validator.from_dict("text")

    def test_missing_node_type(self, validator) -> None:
        """Test a record without a kind is rejected."""
        with pytest.raises(SchemaValidationError) as exc_info:
            validator.from_dict({"text": "Hello"})

        assert exc_info.value.field_name == "node_type"

    def test_unknown_kind(self, validator) -> None:
        """Test an unregistered kind raises UnknownKindError."""
        with pytest.raises(UnknownKindError):
            validator.from_dict({"node_type": "clausemark.plain.Table"})

    def test_missing_required_field(self, validator) -> None:
        """Test a missing required field is rejected."""
        with pytest.raises(SchemaValidationError) as exc_info:
            validator.from_dict({"node_type": TEXT})

        assert exc_info.value.field_name == "text"
        assert exc_info.value.node_type == TEXT

    def test_none_in_required_field(self, validator) -> None:
        """Test None does not satisfy a required field."""
        with pytest.raises(SchemaValidationError):
            validator.from_dict({"node_type": TEXT, "text": None})

    def test_undeclared_field(self, validator) -> None:
        """Test fields outside the kind's schema are rejected."""
        with pytest.raises(SchemaValidationError) as exc_info:
            validator.from_dict({"node_type": TEXT, "text": "a", "clauseid": "c1"})

        assert exc_info.value.field_name == "clauseid"

    def test_wrong_primitive_type(self, validator) -> None:
        """Test a string where an int is required is rejected."""
        with pytest.raises(SchemaValidationError):
            validator.from_dict({"node_type": HEADING, "level": "2"})

    def test_bool_is_not_int(self, validator) -> None:
        """Test booleans do not satisfy integer fields."""
        with pytest.raises(SchemaValidationError):
            validator.from_dict({"node_type": HEADING, "level": True})

    def test_value_outside_choices(self, validator) -> None:
        """Test list types are restricted."""
        with pytest.raises(SchemaValidationError):
            validator.from_dict({"node_type": LIST, "type": "numbered"})

    def test_array_must_be_list(self, validator) -> None:
        """Test array fields must hold lists."""
        with pytest.raises(SchemaValidationError):
            validator.from_dict({"node_type": PARAGRAPH, "children": "text"})

    def test_nested_kind_must_fit_slot(self, validator) -> None:
        """Test a node record in a tag slot is rejected."""
        with pytest.raises(SchemaValidationError):
            validator.from_dict({"node_type": CODE_BLOCK, "text": "x", "tag": {"node_type": TEXT, "text": "y"}})

    def test_expected_type(self, validator) -> None:
        """Test the expected class is enforced at the root."""
        with pytest.raises(SchemaValidationError):
            validator.from_dict({"node_type": TEXT, "text": "x"}, expected=CodeBlock)

    def test_error_hierarchy(self, validator) -> None:
        """Test schema errors are validation errors."""
        with pytest.raises(ValidationError):
            validator.from_dict({"node_type": TEXT})
