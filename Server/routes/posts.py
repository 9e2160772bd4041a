"""
Postboard Server - Posts Endpoints

This module contains the posts resource. Reading is public; creating,
updating and deleting require a valid bearer token.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends

from models.api import MessageResponse, PostCreateRequest, PostUpdateRequest, PostResponse
from models.auth import TokenClaims
from auth import VerifyBearerToken


# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()


# ==================== Public Endpoints ====================

@router.get("/posts", response_model=List[PostResponse], tags=["Posts"])
async def list_posts():
    """
    List all posts, newest first

    Returns:
        List[PostResponse]: All posts
    """
    from database import db_manager

    session = db_manager.GetSession()
    try:
        posts = db_manager.ListPosts(session)
        return [PostResponse.model_validate(post) for post in posts]
    finally:
        session.close()


@router.get("/posts/{post_id}", response_model=PostResponse, tags=["Posts"])
async def get_post(post_id: int):
    """
    Get a single post

    Raises:
        RecordNotFound: If the post does not exist (rendered as 404)
    """
    from database import db_manager

    session = db_manager.GetSession()
    try:
        return PostResponse.model_validate(db_manager.GetPost(session, post_id))
    finally:
        session.close()


# ==================== Protected Endpoints ====================

@router.post("/posts", response_model=PostResponse, tags=["Posts"])
async def create_post(
    post_request: PostCreateRequest,
    claims: TokenClaims = Depends(VerifyBearerToken)
):
    """
    Create a post

    Args:
        post_request: Title, body and optional image URL
        claims: Verified token claims

    Returns:
        PostResponse: The created post
    """
    from database import db_manager

    session = db_manager.GetSession()
    try:
        post = db_manager.CreatePost(
            session,
            title=post_request.title,
            body=post_request.body,
            image=post_request.image
        )

        logger.info(f"User {claims.id} created post {post.id}")

        return PostResponse.model_validate(post)

    finally:
        session.close()


@router.put("/posts/{post_id}", response_model=PostResponse, tags=["Posts"])
async def update_post(
    post_id: int,
    post_request: PostUpdateRequest,
    claims: TokenClaims = Depends(VerifyBearerToken)
):
    """
    Update the provided fields of a post

    Raises:
        RecordNotFound: If the post does not exist (rendered as 404)
    """
    from database import db_manager

    # Title and body cannot be cleared; image can
    changes = {
        field_name: value
        for field_name, value in post_request.model_dump(exclude_unset=True).items()
        if value is not None or field_name == "image"
    }

    session = db_manager.GetSession()
    try:
        post = db_manager.UpdatePost(session, post_id, changes)

        logger.info(f"User {claims.id} updated post {post_id} ({', '.join(changes) or 'no fields'})")

        return PostResponse.model_validate(post)

    finally:
        session.close()


@router.delete("/posts/{post_id}", response_model=MessageResponse, tags=["Posts"])
async def delete_post(
    post_id: int,
    claims: TokenClaims = Depends(VerifyBearerToken)
):
    """
    Delete a post

    Raises:
        RecordNotFound: If the post does not exist (rendered as 404)
    """
    from database import db_manager

    session = db_manager.GetSession()
    try:
        db_manager.DeletePost(session, post_id)
    finally:
        session.close()

    logger.info(f"User {claims.id} deleted post {post_id}")

    return MessageResponse(status="Success", msg="Post deleted")
