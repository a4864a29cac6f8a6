"""Tests for building comment trees from flat records."""

from uuid import uuid4

from inkwell.domain.service.comment_tree import (
    CommentNode,
    build_comment_tree,
    flatten_comment_tree,
)
from inkwell.domain.value import ChapterId, CommentId
from tests.factories import make_record


def _ids(nodes: list[CommentNode]) -> list[CommentId]:
    return [node.id for node in nodes]


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input_gives_empty_forest(self):
        assert build_comment_tree([]) == []

    def test_single_root(self):
        record = make_record()

        roots = build_comment_tree([record])

        assert _ids(roots) == [record.id]
        assert roots[0].children == []
        assert roots[0].content == record.content

    def test_replies_nest_under_parents(self):
        # Arrange
        root = make_record(minute=0)
        reply = make_record(parent=root, minute=1)
        nested = make_record(parent=reply, minute=2)

        # Act
        roots = build_comment_tree([root, reply, nested])

        # Assert
        assert _ids(roots) == [root.id]
        assert _ids(roots[0].children) == [reply.id]
        assert _ids(roots[0].children[0].children) == [nested.id]

    def test_roots_and_siblings_keep_input_order(self):
        first = make_record(minute=0)
        second = make_record(minute=1)
        reply_a = make_record(parent=first, minute=2)
        third = make_record(minute=3)
        reply_b = make_record(parent=first, minute=4)

        roots = build_comment_tree([first, second, reply_a, third, reply_b])

        assert _ids(roots) == [first.id, second.id, third.id]
        assert _ids(roots[0].children) == [reply_a.id, reply_b.id]

    def test_sibling_order_follows_input_not_timestamps(self):
        parent = make_record(minute=0)
        late = make_record(parent=parent, minute=9)
        early = make_record(parent=parent, minute=1)

        roots = build_comment_tree([parent, late, early])

        assert _ids(roots[0].children) == [late.id, early.id]

    def test_reply_listed_before_its_parent_still_attaches(self):
        parent = make_record(minute=0)
        reply = make_record(parent=parent, minute=1)

        roots = build_comment_tree([reply, parent])

        assert _ids(roots) == [parent.id]
        assert _ids(roots[0].children) == [reply.id]

    def test_orphan_is_promoted_to_root(self):
        root = make_record(minute=0)
        orphan = make_record(parent=CommentId(uuid4()), minute=1)
        orphan_reply = make_record(parent=orphan, minute=2)

        roots = build_comment_tree([root, orphan, orphan_reply])

        assert _ids(roots) == [root.id, orphan.id]
        assert _ids(roots[1].children) == [orphan_reply.id]
        # The dangling reference itself is kept on the node
        assert roots[1].parent_id == orphan.parent_id

    def test_self_parented_record_is_a_root(self):
        comment_id = CommentId(uuid4())
        record = make_record(parent=comment_id, comment_id=comment_id)

        roots = build_comment_tree([record])

        assert _ids(roots) == [comment_id]
        assert roots[0].children == []

    def test_deleted_comment_keeps_anchoring_replies(self):
        deleted = make_record(minute=0, deleted=True)
        reply = make_record(parent=deleted, minute=1)

        roots = build_comment_tree([deleted, reply])

        assert _ids(roots) == [deleted.id]
        assert roots[0].is_deleted
        assert roots[0].content == deleted.content
        assert _ids(roots[0].children) == [reply.id]

    def test_every_record_yields_exactly_one_node(self):
        chapter_id = ChapterId(uuid4())
        a = make_record(minute=0, chapter_id=chapter_id)
        b = make_record(parent=a, minute=1, chapter_id=chapter_id)
        c = make_record(parent=b, minute=2, chapter_id=chapter_id)
        d = make_record(parent=CommentId(uuid4()), minute=3, chapter_id=chapter_id)
        e = make_record(parent=a, minute=4, chapter_id=chapter_id, deleted=True)
        records = [a, b, c, d, e]

        flat = flatten_comment_tree(build_comment_tree(records))

        assert sorted(str(i) for i in _ids(flat)) == sorted(str(r.id) for r in records)

    def test_input_records_are_not_changed(self):
        root = make_record(minute=0)
        reply = make_record(parent=root, minute=1)
        records = [root, reply]
        snapshot = [record.model_dump() for record in records]

        build_comment_tree(records)

        assert [record.model_dump() for record in records] == snapshot

    def test_accepts_any_iterable(self):
        root = make_record(minute=0)
        reply = make_record(parent=root, minute=1)

        roots = build_comment_tree(record for record in [root, reply])

        assert _ids(roots) == [root.id]
        assert _ids(roots[0].children) == [reply.id]

    def test_duplicate_ids_attach_replies_to_last_record(self):
        comment_id = CommentId(uuid4())
        first = make_record(minute=0, comment_id=comment_id, content="first")
        second = make_record(minute=1, comment_id=comment_id, content="second")
        reply = make_record(parent=comment_id, minute=2)

        roots = build_comment_tree([first, second, reply])

        assert [node.content for node in roots] == ["first", "second"]
        assert roots[0].children == []
        assert _ids(roots[1].children) == [reply.id]

    def test_deep_thread_is_built(self):
        records = [make_record(minute=0)]
        for minute in range(1, 500):
            records.append(make_record(parent=records[-1], minute=minute))

        roots = build_comment_tree(records)

        assert len(roots) == 1
        assert len(flatten_comment_tree(roots)) == 500


class TestFlattenCommentTree:
    """Tests for flatten_comment_tree and node round trips."""

    def test_pre_order_parent_before_replies(self):
        a = make_record(minute=0)
        a1 = make_record(parent=a, minute=1)
        b = make_record(minute=2)
        a1x = make_record(parent=a1, minute=3)
        a2 = make_record(parent=a, minute=4)

        flat = flatten_comment_tree(build_comment_tree([a, a1, b, a1x, a2]))

        assert _ids(flat) == [a.id, a1.id, a1x.id, a2.id, b.id]

    def test_nodes_convert_back_to_their_records(self):
        root = make_record(minute=0)
        reply = make_record(parent=root, minute=1, deleted=True)
        orphan = make_record(parent=CommentId(uuid4()), minute=2)
        records = [root, reply, orphan]

        flat = flatten_comment_tree(build_comment_tree(records))

        by_id = {record.id: record for record in records}
        for node in flat:
            assert node.to_record() == by_id[node.id]

    def test_rebuilding_from_flattened_records_gives_same_shape(self):
        a = make_record(minute=0)
        b = make_record(parent=a, minute=1)
        c = make_record(minute=2)
        d = make_record(parent=b, minute=3)

        roots = build_comment_tree([a, b, c, d])
        rebuilt = build_comment_tree(
            node.to_record() for node in flatten_comment_tree(roots)
        )

        assert _ids(flatten_comment_tree(rebuilt)) == _ids(flatten_comment_tree(roots))
        assert _ids(rebuilt) == _ids(roots)
