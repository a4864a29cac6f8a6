"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.config import Settings
from inkwell.domain.error import NotFoundError
from inkwell.domain.service import (
    ChapterService,
    CommentNode,
    CommentService,
)
from inkwell.domain.value import ChapterId


class CommentItem(BaseModel):
    """Comment in a discussion thread, with its replies."""

    comment_id: str
    parent_id: str | None
    author_id: str | None
    author_display_name: str | None
    author_avatar_url: str | None
    content: str
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    replies: list["CommentItem"] = Field(default_factory=list)


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    chapter_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    chapter_id: str
    roots: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for reading a chapter's discussion as a tree."""

    def __init__(
        self,
        comment_service: CommentService,
        chapter_service: ChapterService,
        settings: Settings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            chapter_service: Chapter domain service
            settings: Application settings (deleted placeholder, max depth)
        """
        self.comment_service = comment_service
        self.chapter_service = chapter_service
        self.deleted_placeholder = settings.comments.deleted_placeholder
        self.max_depth = settings.comments.max_depth

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Deleted comments stay in the tree so their replies remain reachable,
        but their content and author are hidden. Replies nested deeper than
        ``comments.max_depth`` are listed at that depth in thread order, with
        their ``parent_id`` still pointing at the comment they answer.

        Raises:
            NotFoundError: If the chapter doesn't exist
        """
        chapter_id = ChapterId(UUID(request.chapter_id))
        if await self.chapter_service.get_by_id(chapter_id) is None:
            raise NotFoundError("Chapter", request.chapter_id)

        roots = await self.comment_service.get_comment_thread(chapter_id)

        items: list[CommentItem] = []
        total = 0
        # (node, depth, list the node's item goes into)
        stack: list[tuple[CommentNode, int, list[CommentItem]]] = [
            (root, 1, items) for root in reversed(roots)
        ]
        while stack:
            node, depth, siblings = stack.pop()
            item = self._to_item(node)
            siblings.append(item)
            total += 1

            if depth < self.max_depth:
                stack.extend(
                    (child, depth + 1, item.replies)
                    for child in reversed(node.children)
                )
            else:
                stack.extend(
                    (child, depth, siblings) for child in reversed(node.children)
                )

        return GetCommentsResponse(
            chapter_id=request.chapter_id, roots=items, total=total
        )

    def _to_item(self, node: CommentNode) -> CommentItem:
        parent_id = str(node.parent_id) if node.parent_id is not None else None

        if node.is_deleted:
            return CommentItem(
                comment_id=str(node.id),
                parent_id=parent_id,
                author_id=None,
                author_display_name=None,
                author_avatar_url=None,
                content=self.deleted_placeholder,
                is_deleted=True,
                created_at=node.created_at,
                updated_at=node.updated_at,
            )

        return CommentItem(
            comment_id=str(node.id),
            parent_id=parent_id,
            author_id=str(node.author_id),
            author_display_name=node.author_display_name,
            author_avatar_url=node.author_avatar_url,
            content=node.content,
            is_deleted=False,
            created_at=node.created_at,
            updated_at=node.updated_at,
        )
