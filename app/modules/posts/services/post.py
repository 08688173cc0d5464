from typing import Dict, List, Optional
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.modules.posts.models.post import Post
from app.modules.posts.schemas.post import (
    CreatedPost, FeedComment, FeedPost, OwnPost, OwnPostComment, PostCreate
)
from app.modules.posts.comments.models.comment import Comment, CommentLike
from app.modules.posts.likes.models.like import Like
from app.modules.user_management.models.user import User

logger = logging.getLogger("app")

# Likes are never stored on the post or comment row; both counts are
# correlated subqueries evaluated on every read.
_post_likes = (
    select(func.count(Like.user_id))
    .where(Like.post_id == Post.id)
    .correlate(Post)
    .scalar_subquery()
)

_comment_likes = (
    select(func.count(CommentLike.user_id))
    .where(CommentLike.comment_id == Comment.id)
    .correlate(Comment)
    .scalar_subquery()
)

def get_post(db: Session, post_id: int) -> Optional[Post]:
    """Get post by ID"""
    return db.query(Post).filter(Post.id == post_id).first()

def get_owned_post(db: Session, post_id: int, user_id: int) -> Optional[Post]:
    """Get post by ID only if it belongs to the user"""
    return db.query(Post).filter(Post.id == post_id, Post.user_id == user_id).first()

def count_post_likes(db: Session, post_id: int) -> int:
    return db.query(func.count(Like.user_id)).filter(Like.post_id == post_id).scalar() or 0

def _posts_query(db: Session):
    """Posts joined with their author and live like count, newest first"""
    return (
        db.query(
            Post,
            User.name.label("author"),
            User.username.label("username"),
            User.avatar_url.label("avatar_url"),
            _post_likes.label("likes"),
        )
        .join(User, User.id == Post.user_id)
        .order_by(Post.created_at.desc(), Post.id.desc())
    )

def _comments_by_post(db: Session, post_ids: List[int]) -> Dict[int, List]:
    """Comments of the given posts with author fields and like counts, in creation order"""
    grouped: Dict[int, List] = {post_id: [] for post_id in post_ids}
    if not post_ids:
        return grouped

    rows = (
        db.query(
            Comment,
            User.username.label("username"),
            User.avatar_url.label("avatar_url"),
            _comment_likes.label("likes"),
        )
        .join(User, User.id == Comment.user_id)
        .filter(Comment.post_id.in_(post_ids))
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )
    for row in rows:
        grouped[row.Comment.post_id].append(row)
    return grouped

def _feed_comment(row) -> FeedComment:
    return FeedComment(
        id=row.Comment.id,
        username=row.username,
        avatar_url=row.avatar_url,
        comment=row.Comment.comment,
        created_at=row.Comment.created_at,
        likes=row.likes or 0,
    )

def _own_post_comment(row) -> OwnPostComment:
    return OwnPostComment(
        username=row.username,
        comment=row.Comment.comment,
        created_at=row.Comment.created_at,
    )

def _post_fields(row) -> dict:
    post = row.Post
    return {
        "id": post.id,
        "user_id": post.user_id,
        "text": post.text,
        "image_url": post.image_url,
        "created_at": post.created_at,
        "author": row.author,
        "username": row.username,
        "avatar_url": row.avatar_url,
        "likes": row.likes or 0,
    }

def get_feed(db: Session) -> List[FeedPost]:
    """Every post, newest first, with like counts and full comments"""
    rows = _posts_query(db).all()
    comments = _comments_by_post(db, [row.Post.id for row in rows])
    return [
        FeedPost(
            **_post_fields(row),
            comments=[_feed_comment(c) for c in comments[row.Post.id]],
        )
        for row in rows
    ]

def get_user_posts(db: Session, user_id: int) -> List[OwnPost]:
    """Posts of one author, newest first, with the reduced comment projection"""
    rows = _posts_query(db).filter(Post.user_id == user_id).all()
    comments = _comments_by_post(db, [row.Post.id for row in rows])
    return [
        OwnPost(
            **_post_fields(row),
            comments=[_own_post_comment(c) for c in comments[row.Post.id]],
        )
        for row in rows
    ]

def get_feed_post(db: Session, post_id: int) -> Optional[FeedPost]:
    """A single post in the same shape as a feed entry"""
    row = _posts_query(db).filter(Post.id == post_id).first()
    if row is None:
        return None
    comments = _comments_by_post(db, [post_id])
    return FeedPost(
        **_post_fields(row),
        comments=[_feed_comment(c) for c in comments[post_id]],
    )

def create_post(db: Session, post_in: PostCreate, author: User, default_avatar_url: str) -> CreatedPost:
    """Create new post and return it joined with its author"""
    post = Post(user_id=author.id, **post_in.model_dump())
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info(f"User {author.id} created post {post.id}")

    return CreatedPost(
        id=post.id,
        user_id=post.user_id,
        author=author.name,
        username=author.username,
        avatar_url=author.avatar_url or default_avatar_url,
        text=post.text,
        image_url=post.image_url,
        created_at=post.created_at,
        likes=0,
        comments=[],
        liked_by=[],
    )

def delete_post(db: Session, post: Post) -> None:
    """
    Delete post and everything hanging off it: likes, likes on its
    comments, the comments, then the post itself. One commit, so the
    cascade is all-or-nothing.
    """
    logger.info(f"Deleting post with ID: {post.id}")
    comment_ids = select(Comment.id).where(Comment.post_id == post.id)

    db.query(Like).filter(Like.post_id == post.id).delete(synchronize_session=False)
    db.query(CommentLike).filter(CommentLike.comment_id.in_(comment_ids)).delete(synchronize_session=False)
    db.query(Comment).filter(Comment.post_id == post.id).delete(synchronize_session=False)
    db.delete(post)
    db.commit()
