"""Post routes, including voting and commenting."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import Field

from hunt.application.usecase.base import CamelModel
from hunt.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from hunt.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from hunt.application.usecase.views import CommentView, PostView
from hunt.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from hunt.domain.value import VoteType
from hunt.interface.api.auth import CurrentUserDep
from hunt.interface.api.schemas import ApiResponse

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(CamelModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    caption: str = Field(min_length=1, max_length=1000)
    image_url: str = Field(min_length=1)
    body: str = Field(alias="post", min_length=1, max_length=20000)


class UpdatePostAPIRequest(CamelModel):
    """API request for editing a post. Omitted fields are unchanged."""

    title: str | None = Field(default=None, max_length=300)
    caption: str | None = Field(default=None, max_length=1000)
    image_url: str | None = None
    body: str | None = Field(default=None, alias="post", max_length=20000)


class VoteAPIRequest(CamelModel):
    """API request for voting on a post."""

    type: VoteType


class CommentAPIRequest(CamelModel):
    """API request for commenting on a post."""

    comment: str = Field(max_length=10000)


@router.get("", response_model=ApiResponse[list[PostView]])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: int = Query(default=100, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ApiResponse[list[PostView]]:
    """List posts, newest first."""
    posts = await list_posts_use_case.execute(
        ListPostsRequest(limit=limit, offset=offset)
    )
    return ApiResponse(data=posts)


@router.get("/user/{user_id}", response_model=ApiResponse[list[PostView]])
async def list_posts_by_user(
    user_id: UUID,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> ApiResponse[list[PostView]]:
    """List one user's posts, newest first."""
    posts = await list_posts_use_case.execute(
        ListPostsRequest(author_id=str(user_id))
    )
    return ApiResponse(data=posts)


@router.get("/{post_id}", response_model=ApiResponse[PostView])
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> ApiResponse[PostView]:
    """Get a post with its comments and votes."""
    post = await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))
    return ApiResponse(data=post)


@router.post(
    "",
    response_model=ApiResponse[PostView],
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    user: CurrentUserDep,
) -> ApiResponse[PostView]:
    """Create a new post.

    Requires authentication. The author's name is taken from the token.
    """
    post = await create_post_use_case.execute(
        CreatePostRequest(
            author_id=user.user_id,
            first_name=user.first_name,
            last_name=user.last_name,
            title=request.title,
            caption=request.caption,
            image_url=request.image_url,
            body=request.body,
        )
    )
    return ApiResponse(data=post)


@router.put("/{post_id}", response_model=ApiResponse[PostView])
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    user: CurrentUserDep,
) -> ApiResponse[PostView]:
    """Edit a post. Only the author can edit."""
    post = await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=str(post_id),
            user_id=user.user_id,
            title=request.title,
            caption=request.caption,
            image_url=request.image_url,
            body=request.body,
        )
    )
    return ApiResponse(data=post)


@router.delete("/{post_id}", response_model=ApiResponse[DeletePostResponse])
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    user: CurrentUserDep,
) -> ApiResponse[DeletePostResponse]:
    """Delete a post. Only the author can delete."""
    result = await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), user_id=user.user_id)
    )
    return ApiResponse(data=result)


@router.post(
    "/{post_id}/comment",
    response_model=ApiResponse[list[CommentView]],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: UUID,
    request: CommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    user: CurrentUserDep,
) -> ApiResponse[list[CommentView]]:
    """Comment on a post.

    Returns:
        The post's comments, most recent first
    """
    comments = await add_comment_use_case.execute(
        AddCommentRequest(
            post_id=str(post_id),
            text=request.comment,
            author_id=user.user_id,
            first_name=user.first_name,
            last_name=user.last_name,
        )
    )
    return ApiResponse(data=comments)


@router.post("/{post_id}/vote", response_model=ApiResponse[PostView])
async def vote(
    post_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    user: CurrentUserDep,
) -> ApiResponse[PostView]:
    """Upvote or downvote a post.

    Casting the vote you already hold withdraws it; casting the other kind
    flips it.

    Returns:
        The full updated post
    """
    post = await cast_vote_use_case.execute(
        CastVoteRequest(post_id=str(post_id), user_id=user.user_id, type=request.type)
    )
    return ApiResponse(data=post)
