"""
Postboard Server - Database Manager

This module manages database connection, initialization, and the user
and post storage operations shared by the routes and the setup script.
"""

import logging
import random
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from models.database import Base, User, Post
from exceptions import StorageConflict, RecordNotFound

logger = logging.getLogger(__name__)


# Sample content for SeedPosts
SAMPLE_TITLES = [
    "Slow-roasted tomatoes with garlic and thyme",
    "A weeknight ramen you can make in twenty minutes",
    "Notes from a farmers market in early spring",
    "Why sourdough starters are worth the patience",
    "Three salads that travel well for lunch",
    "The case for cooking beans from dry",
    "Brown butter and everything it improves",
]

SAMPLE_SENTENCES = [
    "Start with the best ingredients you can find and do as little to them as possible.",
    "Most of the work here happens in the oven while you get on with something else.",
    "Leftovers keep for three days in the fridge and taste better on the second.",
    "If you cannot find fresh herbs, a smaller amount of dried will do.",
    "Salt early and taste often, adjusting as the flavors come together.",
    "Serve warm with crusty bread and a simple green salad.",
    "A squeeze of lemon at the end brightens the whole dish.",
]

SAMPLE_IMAGE_URL = "https://loremflickr.com/640/480/food?lock={}"


class DatabaseManager:
    """
    Manages database connection, initialization, and operations
    """

    def __init__(self, database_url: str = "sqlite:///database/postboard.db"):
        """
        Initialize database manager

        Args:
            database_url: SQLAlchemy database URL
        """
        self.database_url = database_url

        url = make_url(database_url)
        connect_args = {}
        if url.get_backend_name() == "sqlite":
            # Sessions are opened from the threadpool as well as the event loop
            connect_args["check_same_thread"] = False

            # Ensure database directory exists
            if url.database and url.database != ":memory:":
                db_dir = Path(url.database).parent
                if str(db_dir) != '.':
                    db_dir.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(database_url, echo=False, connect_args=connect_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False)

    def InitializeDatabase(self):
        """
        Create all tables if they don't exist
        """
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database schema ready at {self.engine.url.render_as_string(hide_password=True)}")

    def GetSession(self):
        """
        Get a new database session

        Returns:
            Session: SQLAlchemy session
        """
        return self.SessionLocal()

    def Dispose(self):
        """Release all pooled connections"""
        self.engine.dispose()

    # ==================== User Operations ====================

    def CreateUser(self, session, name: str, email: str, password_hash: str) -> User:
        """
        Insert a new user

        Args:
            session: SQLAlchemy session
            name: Display name
            email: Login email (must be unique)
            password_hash: bcrypt digest of the password

        Returns:
            User: The created user

        Raises:
            StorageConflict: If the email is already registered
        """
        user = User(name=name, email=email, password_hash=password_hash)
        session.add(user)
        try:
            session.commit()
        except IntegrityError as e:
            session.rollback()
            raise StorageConflict("Email already registered", field="email") from e

        return user

    def GetUserByEmail(self, session, email: str) -> Optional[User]:
        """
        Look up a user by email

        Args:
            session: SQLAlchemy session
            email: Email to match (exact, storage collation)

        Returns:
            User: Matching user, or None
        """
        return session.query(User).filter(User.email == email).first()

    # ==================== Post Operations ====================

    def ListPosts(self, session) -> list:
        """Get all posts, newest first"""
        return session.query(Post).order_by(Post.created_at.desc(), Post.id.desc()).all()

    def GetPost(self, session, post_id: int) -> Post:
        """
        Get a post by id

        Raises:
            RecordNotFound: If no post has this id
        """
        post = session.query(Post).filter(Post.id == post_id).first()
        if post is None:
            raise RecordNotFound("Post", post_id)
        return post

    def CreatePost(self, session, title: str, body: str, image: Optional[str] = None) -> Post:
        """Insert a new post and return it"""
        post = Post(title=title, body=body, image=image)
        session.add(post)
        session.commit()
        return post

    def UpdatePost(self, session, post_id: int, changes: dict) -> Post:
        """
        Apply a partial update to a post

        Args:
            session: SQLAlchemy session
            post_id: Post to update
            changes: Column name to new value, only for provided fields

        Raises:
            RecordNotFound: If no post has this id
        """
        post = self.GetPost(session, post_id)
        for field_name, value in changes.items():
            setattr(post, field_name, value)
        post.updated_at = datetime.now(timezone.utc)
        session.commit()
        return post

    def DeletePost(self, session, post_id: int):
        """
        Delete a post

        Raises:
            RecordNotFound: If no post has this id
        """
        post = self.GetPost(session, post_id)
        session.delete(post)
        session.commit()

    # ==================== Seed Data ====================

    def SeedPosts(self, count: int = 5) -> int:
        """
        Insert sample posts with a past creation time and a recent update time

        Args:
            count: Number of posts to insert

        Returns:
            int: Number of posts inserted

        Raises:
            ValueError: If count is less than 1
        """
        if count < 1:
            raise ValueError("count must be at least 1")

        now = datetime.now(timezone.utc)
        session = self.GetSession()

        try:
            for _ in range(count):
                created_at = now - timedelta(days=random.randint(30, 365), minutes=random.randint(0, 1439))
                updated_at = now - timedelta(days=random.randint(0, 6), minutes=random.randint(0, 1439))
                post = Post(
                    title=random.choice(SAMPLE_TITLES),
                    body=" ".join(random.sample(SAMPLE_SENTENCES, 4)),
                    image=SAMPLE_IMAGE_URL.format(random.randint(1, 10000)),
                    created_at=created_at,
                    updated_at=max(created_at, updated_at)
                )
                session.add(post)
            session.commit()

        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

        logger.info(f"Seeded {count} posts")
        return count

    def UnseedPosts(self) -> int:
        """
        Delete every post

        Returns:
            int: Number of posts deleted
        """
        session = self.GetSession()

        try:
            deleted = session.query(Post).delete()
            session.commit()

        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

        logger.info(f"Deleted {deleted} posts")
        return deleted
