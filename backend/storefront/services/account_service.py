import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from storefront.core.exceptions import EmailInUseError, InvalidCredentialError, UserNotFoundError
from storefront.core.security import create_access_token, get_password_hash, verify_password
from storefront.models.user import User

logger = logging.getLogger(__name__)


class AccountService:
    """Registration, login and profile lookup"""

    @staticmethod
    def register(db: Session, name: str, email: str, password: str) -> User:
        """
        Create a user with a hashed password.

        Raises EmailInUseError when the email is taken, either by the lookup
        below or by the unique constraint when another request got there first.
        """
        existing_user = db.query(User).filter(User.email == email).first()
        if existing_user:
            raise EmailInUseError(email)

        user = User(name=name, email=email, hashed_password=get_password_hash(password))
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise EmailInUseError(email)
        db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return user

    @staticmethod
    def login(db: Session, email: str, password: str) -> str:
        """Check credentials and return a signed token for the user"""
        user = db.query(User).filter(User.email == email).first()
        if not user:
            raise UserNotFoundError(email=email)

        if not verify_password(password, user.hashed_password):
            logger.warning(f"Invalid password for user {user.id}")
            raise InvalidCredentialError()

        return create_access_token({"id": user.id, "email": user.email})

    @staticmethod
    def get_user(db: Session, user_id: int) -> User:
        # The token can outlive the account it was issued for
        user = db.get(User, user_id)
        if user is None:
            raise UserNotFoundError(id=user_id)
        return user


account_service = AccountService()
