"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def get_by_ids(self, user_ids: list[int]) -> list[User]:
        """
        Get several users at once, ordered by ID.

        Args:
            user_ids: User IDs; unknown IDs are ignored

        Returns:
            List of users
        """
        if not user_ids:
            return []
        statement = select(User).where(User.id.in_(user_ids)).order_by(User.id)
        return list(self.session.exec(statement).all())

    def get_trainees(self, group_name: Optional[str] = None) -> list[User]:
        """
        Get trainees, optionally restricted to one group.

        Group membership is a JSON list, so the group filter runs in
        Python to stay portable across database backends.

        Args:
            group_name: Group to filter on, or None for every trainee

        Returns:
            List of users with role ``user``
        """
        statement = select(User).where(User.role == "user").order_by(User.id)
        users = list(self.session.exec(statement).all())
        if group_name is None:
            return users
        return [u for u in users if group_name in (u.group_names or [])]

    def update(self, user: User) -> User:
        """
        Stage changes to an existing user without committing.

        Args:
            user: User instance with updated data

        Returns:
            Updated user
        """
        self.session.add(user)
        self.session.flush()
        return user
