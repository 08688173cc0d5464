# Import all models here so metadata.create_all sees every table
from app.db.session import Base

from app.modules.user_management.models.user import User
from app.modules.subscriptions.models.subscription import Subscription
from app.modules.posts.models.post import Post
from app.modules.posts.comments.models.comment import Comment, CommentLike
from app.modules.posts.likes.models.like import Like
from app.modules.follows.models.follower import Follower
