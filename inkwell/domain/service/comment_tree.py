"""Comment tree building.

Comments are stored flat, each row pointing at its parent. A chapter's
discussion is rebuilt in memory from the rows fetched for it:

    records = await comment_repository.find_records_by_chapter(chapter_id)
    roots = build_comment_tree(records)

The builder is a pure function: no I/O, no logging, no sorting. Sibling order
is the order of the input, so callers pass records ordered by creation time.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from inkwell.domain.model.comment import CommentRecord
from inkwell.domain.value import ChapterId, CommentId, UserId


@dataclass
class CommentNode:
    """A comment in a discussion tree.

    Carries every field of the record it was built from plus its replies,
    in the order they appeared in the input.
    """

    id: CommentId
    chapter_id: ChapterId
    author_id: UserId
    author_display_name: str
    author_avatar_url: Optional[str]
    content: str
    parent_id: Optional[CommentId]
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime]
    children: list["CommentNode"] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: CommentRecord) -> "CommentNode":
        return cls(
            id=record.id,
            chapter_id=record.chapter_id,
            author_id=record.author_id,
            author_display_name=record.author_display_name,
            author_avatar_url=record.author_avatar_url,
            content=record.content,
            parent_id=record.parent_id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            deleted_at=record.deleted_at,
        )

    def to_record(self) -> CommentRecord:
        """Flat record of this node, without its children."""
        return CommentRecord(
            id=self.id,
            chapter_id=self.chapter_id,
            author_id=self.author_id,
            author_display_name=self.author_display_name,
            author_avatar_url=self.author_avatar_url,
            content=self.content,
            parent_id=self.parent_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
            deleted_at=self.deleted_at,
        )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


def build_comment_tree(records: Iterable[CommentRecord]) -> list[CommentNode]:
    """Build a forest of comment nodes from flat records.

    Algorithm (two passes, O(n)):
    1. Create one node per record and index nodes by id
    2. Walk the records again in input order and attach each node to its
       parent's children, or to the roots when it has no parent

    A record whose parent is not among the records (orphan) becomes a root
    rather than being dropped. Soft-deleted records stay in the tree and keep
    anchoring their replies; hiding their content is up to the caller.

    All records are assumed to belong to one chapter and to have unique ids.
    With duplicate ids replies attach to the last record carrying the id;
    every record still yields exactly one node.

    Args:
        records: Comment records of one chapter, ordered by creation time

    Returns:
        Root nodes in input order, each with its replies populated
    """
    records = list(records)

    # Pass 1: index
    nodes = [CommentNode.from_record(record) for record in records]
    index: dict[CommentId, CommentNode] = {node.id: node for node in nodes}

    # Pass 2: link, in input order so siblings keep creation order
    roots: list[CommentNode] = []
    for record, node in zip(records, nodes):
        if record.parent_id is None:
            roots.append(node)
            continue

        parent = index.get(record.parent_id)
        if parent is None or parent is node:
            # Orphan, or a row pointing at itself
            roots.append(node)
        else:
            parent.children.append(node)

    return roots


def flatten_comment_tree(roots: Iterable[CommentNode]) -> list[CommentNode]:
    """Flatten a forest back to a list in pre-order (parent before replies).

    Args:
        roots: Root nodes as returned by build_comment_tree

    Returns:
        Every node of the forest, each parent followed by its subtree
    """
    flat: list[CommentNode] = []
    stack = list(reversed(list(roots)))
    while stack:
        node = stack.pop()
        flat.append(node)
        stack.extend(reversed(node.children))
    return flat
