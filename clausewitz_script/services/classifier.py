"""Structural classification of brace groups into Array or Block."""
from typing import Sequence, Union

from ..models.ast import Array, Block, Comment, Pair


def classify(children: Sequence, comments_force_block: bool = False) -> Union[Array, Block]:
    """Decide whether the parsed children of a brace group form an Array or a Block.

    One linear scan. A Pair anywhere makes the group a Block and every child
    is kept in order; once a Pair has been seen the result cannot go back to
    Array. Without a Pair the group is an Array of its values, with comments
    kept in place, unless ``comments_force_block`` is set and a comment is
    present. An empty group is an empty Array.

    Args:
        children: Items already built from the group, in source order
        comments_force_block: Treat a comment like a Pair for classification
    """
    is_block = False
    for child in children:
        if isinstance(child, Pair):
            is_block = True
            break
        if comments_force_block and isinstance(child, Comment):
            is_block = True
            break

    if is_block:
        return Block(tuple(children))
    return Array(tuple(children))
