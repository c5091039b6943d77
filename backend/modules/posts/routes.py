"""
Post API endpoints.

Provides REST endpoints for posts, votes and comments.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_post_service

from .interfaces import IPostService
from .models import (
    Post,
    VoteDirection,
    CreatePostRequest,
    UpdatePostRequest,
    AddCommentRequest,
    PostCreationResult,
    MessageResponse,
    CommentAddedResponse,
)

router = APIRouter()


@router.get("", response_model=list[Post])
async def list_posts(
    service: IPostService = Depends(get_post_service),
) -> list[Post]:
    """List all posts, newest first."""
    return await service.list_posts()


@router.get("/{post_id}", response_model=Post)
async def get_post(
    post_id: str,
    service: IPostService = Depends(get_post_service),
) -> Post:
    """Get a single post with its comments."""
    return await service.get_post(post_id)


@router.post("", response_model=PostCreationResult, status_code=201)
async def create_post(
    request: CreatePostRequest,
    service: IPostService = Depends(get_post_service),
) -> PostCreationResult:
    """
    Create a post.

    Free members are limited to a fixed number of posts; past the limit
    this returns 403 with code POST_LIMIT_EXCEEDED. Every other user is
    notified of the new post.
    """
    return await service.create_post(request)


@router.put("/{post_id}", response_model=MessageResponse)
async def update_post(
    post_id: str,
    request: UpdatePostRequest,
    service: IPostService = Depends(get_post_service),
) -> MessageResponse:
    """Overwrite the supplied fields of a post."""
    await service.replace_post(post_id, request.changes())
    return MessageResponse(message="Post updated successfully")


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    service: IPostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post and its comments."""
    await service.delete_post(post_id)
    return MessageResponse(message="Post deleted successfully")


@router.put("/{post_id}/upvote", response_model=MessageResponse)
async def upvote_post(
    post_id: str,
    service: IPostService = Depends(get_post_service),
) -> MessageResponse:
    await service.vote(post_id, VoteDirection.UP)
    return MessageResponse(message="Upvoted successfully")


@router.put("/{post_id}/downvote", response_model=MessageResponse)
async def downvote_post(
    post_id: str,
    service: IPostService = Depends(get_post_service),
) -> MessageResponse:
    await service.vote(post_id, VoteDirection.DOWN)
    return MessageResponse(message="Downvoted successfully")


@router.put("/{post_id}/comment", response_model=CommentAddedResponse)
async def add_comment(
    post_id: str,
    request: AddCommentRequest,
    service: IPostService = Depends(get_post_service),
) -> CommentAddedResponse:
    """Append a comment to a post."""
    comment = await service.add_comment(
        post_id,
        request.author_name,
        request.author_image,
        request.text,
    )
    return CommentAddedResponse(message="Comment added successfully", comment=comment)
