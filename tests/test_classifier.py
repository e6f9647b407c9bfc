"""
Tests for Array vs Block classification of brace groups.

Verifies:
- Pair-less groups become Arrays, any Pair makes a Block
- Comments stay inside Arrays unless comments_force_block is set
- Source order of children is kept in both shapes
"""
import pytest

from clausewitz_script import parse
from clausewitz_script.config import ParserConfig
from clausewitz_script.models.ast import Array, Block, Comment, Identifier, Number, Operator, Pair
from clausewitz_script.services.classifier import classify


def _group(text, **config):
    [pair] = parse(f"g = {text}", ParserConfig(**config)).items
    return pair.value


class TestClassify:

    def test_values_only_is_array(self):
        assert _group("{ a b c }") == Array((Identifier('a'), Identifier('b'), Identifier('c')))

    def test_single_pair_is_block(self):
        assert _group("{ k = v }") == Block((Pair(Identifier('k'), Operator.EQ, Identifier('v')),))

    def test_values_then_pair_is_block(self):
        block = _group("{ a b k = v }")
        assert isinstance(block, Block)
        assert block.items == (
            Identifier('a'),
            Identifier('b'),
            Pair(Identifier('k'), Operator.EQ, Identifier('v')),
        )

    def test_pair_then_values_is_block(self):
        block = _group("{ k = v a }")
        assert isinstance(block, Block)
        assert block.items[-1] == Identifier('a')

    def test_empty_group_is_empty_array(self):
        group = _group("{ }")
        assert group == Array(())
        assert len(group) == 0

    def test_nested_groups_are_classified_independently(self):
        group = _group("{ { k = v } { 1 2 } }")
        assert isinstance(group, Array)
        assert isinstance(group.values[0], Block)
        assert isinstance(group.values[1], Array)


class TestCommentPolicy:

    TEXT = "{\n\t1 2 3\n\t# coastal\n\t4\n}"

    def test_comment_kept_in_array_by_default(self):
        assert _group(self.TEXT) == Array((
            Number(1.0), Number(2.0), Number(3.0), Comment('# coastal'), Number(4.0),
        ))

    def test_comment_forces_block(self):
        block = _group(self.TEXT, comments_force_block=True)
        assert isinstance(block, Block)
        assert block.items[3] == Comment('# coastal')

    def test_comment_only_group(self):
        assert isinstance(_group("{\n\t# nothing yet\n}"), Array)
        assert isinstance(_group("{\n\t# nothing yet\n}", comments_force_block=True), Block)

    @pytest.mark.parametrize("force", [False, True])
    def test_pair_wins_either_way(self, force):
        assert isinstance(_group("{ # c\n k = v }", comments_force_block=force), Block)


class TestDirect:

    def test_classify_keeps_order(self):
        children = [Number(1.0), Comment('# c'), Pair(Identifier('k'), Operator.EQ, Number(2.0))]
        assert classify(children) == Block(tuple(children))

    def test_classify_no_children(self):
        assert classify([]) == Array(())
