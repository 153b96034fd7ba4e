"""
User repository - data access for User entity and job applications.
"""
from typing import Any, Dict, List, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import (
    DuplicateUsernameException,
    InvalidCredentialsException,
    JobNotFoundException,
    UserNotFoundException,
)
from jobly.core.security import hash_password, verify_password
from jobly.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    table = "users"
    key_column = "username"
    columns = "username, first_name, last_name, email, is_admin"
    column_map = {
        "firstName": "first_name",
        "lastName": "last_name",
    }

    async def authenticate(
        self,
        db: AsyncSession,
        username: str,
        password: str,
    ) -> Dict[str, Any]:
        """
        Return the user if the password matches.

        Raises:
            InvalidCredentialsException: on unknown user or wrong password.
        """
        user = await self._fetch_one(
            db,
            f"SELECT {self.columns}, password FROM users WHERE username = :p1",
            [username],
        )
        if not user or not verify_password(password, user.pop("password")):
            raise InvalidCredentialsException()
        return user

    async def register(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
        is_admin: bool = False,
        rounds: int = 12,
    ) -> Dict[str, Any]:
        """
        Insert a user with a hashed password.

        Raises:
            DuplicateUsernameException: if the username is taken.
        """
        duplicate = await self._fetch_one(
            db,
            "SELECT username FROM users WHERE username = :p1",
            [username],
        )
        if duplicate:
            raise DuplicateUsernameException(username)

        try:
            return await self._fetch_one(
                db,
                f"""INSERT INTO users
                       (username, password, first_name, last_name, email, is_admin)
                    VALUES (:p1, :p2, :p3, :p4, :p5, :p6)
                    RETURNING {self.columns}""",
                [
                    username,
                    hash_password(password, rounds),
                    first_name,
                    last_name,
                    email,
                    is_admin,
                ],
            )
        except IntegrityError:
            raise DuplicateUsernameException(username)

    async def find_all(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """All users, ordered by username."""
        return await self._fetch_all(
            db,
            f"SELECT {self.columns} FROM users ORDER BY username",
        )

    async def get(
        self,
        db: AsyncSession,
        username: str,
    ) -> Dict[str, Any]:
        """
        Get a user with the ids of the jobs they applied to.

        Raises:
            UserNotFoundException: if no user has this username.
        """
        user = await self._fetch_one(
            db,
            f"SELECT {self.columns} FROM users WHERE username = :p1",
            [username],
        )
        if not user:
            raise UserNotFoundException(username)

        applications = await self._fetch_all(
            db,
            "SELECT job_id FROM applications WHERE username = :p1 ORDER BY job_id",
            [username],
        )
        user["jobs"] = [app["job_id"] for app in applications]
        return user

    async def update(
        self,
        db: AsyncSession,
        username: str,
        data: Mapping[str, Any],
        rounds: int = 12,
    ) -> Dict[str, Any]:
        """
        Partially update a user. A new ``password`` is hashed before storing.

        Raises:
            BadRequestException: if ``data`` is empty.
            UserNotFoundException: if no user has this username.
        """
        data = dict(data)
        if data.get("password"):
            data["password"] = hash_password(data["password"], rounds)

        user = await self._update_by_key(db, username, data)
        if not user:
            raise UserNotFoundException(username)
        return user

    async def remove(
        self,
        db: AsyncSession,
        username: str,
    ) -> None:
        if not await self._delete_by_key(db, username):
            raise UserNotFoundException(username)

    async def apply_to_job(
        self,
        db: AsyncSession,
        username: str,
        job_id: int,
    ) -> None:
        """
        Record that ``username`` applied to ``job_id``. Applying twice is a
        no-op.

        Raises:
            JobNotFoundException / UserNotFoundException
        """
        job = await self._fetch_one(db, "SELECT id FROM jobs WHERE id = :p1", [job_id])
        if not job:
            raise JobNotFoundException(job_id)

        user = await self._fetch_one(
            db,
            "SELECT username FROM users WHERE username = :p1",
            [username],
        )
        if not user:
            raise UserNotFoundException(username)

        existing = await self._fetch_one(
            db,
            "SELECT job_id FROM applications WHERE username = :p1 AND job_id = :p2",
            [username, job_id],
        )
        if existing:
            return

        await self._fetch_one(
            db,
            """INSERT INTO applications (job_id, username)
               VALUES (:p1, :p2)
               RETURNING job_id""",
            [job_id, username],
        )
