"""
Depth-first traversal of token trees.

Every consumer that needs all leaves of a tree (the variable transformer, the
style extractor, the CLI listing) goes through ``walk_leaves`` so that the
visiting order and path construction stay identical everywhere.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from tokenbridge.schema.tokens import Group, Leaf, Token, TokenGroup

LeafHandler = Callable[[tuple[str, ...], Token], None]


@dataclass(frozen=True)
class FlattenedToken:
    """A leaf token together with its full path from the tree root."""

    path: tuple[str, ...]
    token: Token

    @property
    def dotted(self) -> str:
        return ".".join(self.path)

    @property
    def slashed(self) -> str:
        return "/".join(self.path)


def walk_leaves(
    group: TokenGroup, handler: LeafHandler, base_path: tuple[str, ...] = ()
) -> None:
    """Call ``handler(path, token)`` for every leaf, depth first, in order.

    Args:
        group: Tree to walk
        handler: Callback receiving the full path and the token
        base_path: Path prefix of ``group`` itself
    """
    for name, node in group.items():
        path = (*base_path, name)
        if isinstance(node, Leaf):
            handler(path, node.token)
        elif isinstance(node, Group):
            walk_leaves(node.group, handler, path)


def flatten_tokens(group: TokenGroup) -> list[FlattenedToken]:
    """Return every leaf of a tree as (path, token) pairs in visiting order."""
    flattened: list[FlattenedToken] = []
    walk_leaves(group, lambda path, token: flattened.append(FlattenedToken(path, token)))
    return flattened


def resolve_path(group: TokenGroup, path: Sequence[str]) -> Token | None:
    """Find the token stored at ``path``.

    Returns:
        The token, or None if the path is absent or ends at a group
    """
    current = group
    for depth, segment in enumerate(path):
        node = current.get(segment)
        if node is None:
            return None
        if isinstance(node, Leaf):
            return node.token if depth == len(path) - 1 else None
        current = node.group
    return None
