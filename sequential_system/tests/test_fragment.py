"""
Tests for plan fragment recovery and the markup tree
"""

import pytest

from plan_compiler.core.errors import MalformedFragment, MarkupSyntaxError, NoPlanFound
from plan_compiler.parsing.fragment import extract_fragment
from plan_compiler.parsing.tree import CommentNode, ElementNode, TextNode, find_elements, parse_fragment


class TestExtractFragment:
    """Tests for extract_fragment"""

    def test_well_formed_text_is_returned_unchanged(self):
        text = 'Plan follows:\n<plan>\n  <function.Writer.Tell input="x"/>\n</plan>'
        assert extract_fragment(text) == text

    def test_missing_closing_tag_is_recovered(self):
        text = "Here is your plan: <plan><function.X.Y/>"
        assert extract_fragment(text) == "<plan><function.X.Y/></plan>"

    def test_plan_cut_out_of_noisy_prose(self):
        text = 'Sure & enjoy: <plan name="p"><function.A.B/>\n</plan> <unclosed>'
        assert extract_fragment(text) == '<plan name="p"><function.A.B/>\n</plan>'

    def test_first_plan_wins_when_text_is_noisy(self):
        text = "<plan><function.A.B/></plan> & <plan><function.C.D/></plan>"
        assert extract_fragment(text) == "<plan><function.A.B/></plan>"

    def test_plain_prose_has_no_plan(self):
        with pytest.raises(NoPlanFound) as exc:
            extract_fragment("I cannot help with that.")
        assert exc.value.text == "I cannot help with that."

    def test_broken_prose_has_no_plan(self):
        with pytest.raises(NoPlanFound):
            extract_fragment("<steps><step>one</steps>")

    def test_none_is_treated_as_empty(self):
        with pytest.raises(NoPlanFound) as exc:
            extract_fragment(None)
        assert exc.value.text == ""

    def test_opening_tag_attributes_may_span_lines(self):
        text = "Plan & notes: <plan a=\"1\"\n      b=\"2\"><function.X.Y/>"
        assert extract_fragment(text) == "<plan a=\"1\"\n      b=\"2\"><function.X.Y/></plan>"

    def test_opening_tag_without_end_has_no_plan(self):
        with pytest.raises(NoPlanFound):
            extract_fragment("<plan " * 50000)

    def test_many_unclosed_plans_are_malformed(self):
        text = "<plan>" * 20000
        with pytest.raises(MalformedFragment) as exc:
            extract_fragment(text)
        assert exc.value.fragment == text + "</plan>"

    def test_unparseable_plan_is_malformed(self):
        text = "<plan><function.A.B x=1/></plan>"
        with pytest.raises(MalformedFragment) as exc:
            extract_fragment(text)
        assert exc.value.text == text
        assert exc.value.fragment == text
        assert isinstance(exc.value.__cause__, MarkupSyntaxError)


class TestParseFragment:
    """Tests for parse_fragment"""

    def test_keeps_comments_text_and_attribute_order(self):
        root = parse_fragment('<plan><!-- c --><function.A.B b="2" a="1"/> tail</plan>')
        assert root.tag == "xml"

        plan = root.children[0]
        assert isinstance(plan, ElementNode)
        comment, function, text = plan.children
        assert comment == CommentNode(text=" c ")
        assert function.tag == "function.A.B"
        assert function.attributes == [("b", "2"), ("a", "1")]
        assert text == TextNode(text=" tail")

    def test_syntax_error_carries_position(self):
        with pytest.raises(MarkupSyntaxError) as exc:
            parse_fragment("<plan>\n<a></b></plan>")
        assert exc.value.line == 2

    def test_find_elements_in_document_order(self):
        root = parse_fragment("<plan id='1'/><outer><plan id='2'><plan id='3'/></plan></outer>")
        ids = [dict(e.attributes)["id"] for e in find_elements(root, "plan")]
        assert ids == ["1", "2", "3"]

    def test_find_elements_is_case_sensitive(self):
        root = parse_fragment("<Plan/><PLAN/>")
        assert list(find_elements(root, "plan")) == []

    def test_deep_nesting_does_not_recurse(self):
        depth = 5000
        root = parse_fragment("<a>" * depth + "<plan id='deep'/>" + "</a>" * depth)
        found = list(find_elements(root, "plan"))
        assert [dict(e.attributes)["id"] for e in found] == ["deep"]
