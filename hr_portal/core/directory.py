from sqlalchemy.orm import Session

from hr_portal.core.errors import NotFound
from hr_portal.models.document import Document
from hr_portal.models.enums import DocumentType, UserRole
from hr_portal.models.user import User


class Directory:
    """
    Roster of users and teams. The only writer of the User collection.

    Lookups return None / [] for unknown keys; the *_or_404 helpers raise NotFound.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_users(self, limit: int | None = None, offset: int = 0) -> list[User]:
        query = self.db.query(User).order_by(User.id.asc()).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_users(self) -> int:
        return self.db.query(User).count()

    def find_by_email(self, email: str) -> User | None:
        # case-sensitive on purpose: the stored email is the login key
        return self.db.query(User).filter(User.email == email).one_or_none()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def get_or_404(self, user_id: int) -> User:
        user = self.find_by_id(user_id)
        if not user:
            raise NotFound(f"User {user_id} not found")
        return user

    def members_of_team(self, team: str) -> list[User]:
        return self.db.query(User).filter(User.team == team).order_by(User.id.asc()).all()

    def manager_of_team(self, team: str) -> User | None:
        return (
            self.db.query(User)
            .filter(User.team == team, User.role == UserRole.MANAGER)
            .order_by(User.id.asc())
            .first()
        )

    def subordinates_of(self, manager_id: int) -> list[User]:
        manager = self.find_by_id(manager_id)
        if not manager or manager.role != UserRole.MANAGER:
            return []
        return (
            self.db.query(User)
            .filter(User.team == manager.team, User.role == UserRole.EMPLOYEE)
            .order_by(User.id.asc())
            .all()
        )

    def teams(self) -> list[str]:
        rows = self.db.query(User.team).distinct().order_by(User.team.asc()).all()
        return [r[0] for r in rows]

    def append_document(
        self,
        owner: User,
        *,
        name: str,
        doc_type: DocumentType,
        url: str | None = None,
    ) -> Document:
        doc = Document(
            user_id=owner.id,
            name=name,
            type=doc_type,
            url=url or f"/uploads/{owner.id}/{name}",
        )
        self.db.add(doc)
        self.db.flush()
        self.db.refresh(owner)
        return doc

    def replace_avatar(self, owner: User, avatar: str | None) -> User:
        owner.avatar = avatar
        self.db.flush()
        return owner
