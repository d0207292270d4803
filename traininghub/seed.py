"""Demo accounts for local development and testing.

Not a provisioning mechanism: the credentials are fixed and public.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from traininghub.core.security import get_password_hash
from traininghub.models.user import User, UserRole

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {
        "email": "admin@traininghub.com",
        "password": "admin123",
        "first_name": "Admin",
        "last_name": "User",
        "role": UserRole.ADMIN,
        "department": "Administration",
        "position": "System Administrator",
        "location": "Head Office",
    },
    {
        "email": "manager@traininghub.com",
        "password": "manager123",
        "first_name": "Manager",
        "last_name": "User",
        "role": UserRole.MANAGER,
        "department": "Human Resources",
        "position": "HR Manager",
        "location": "Head Office",
    },
    {
        "email": "employee@traininghub.com",
        "password": "employee123",
        "first_name": "Employee",
        "last_name": "User",
        "role": UserRole.EMPLOYEE,
        "department": "Engineering",
        "position": "Software Developer",
        "location": "Main Office",
    },
]


def seed_demo_users(db: Session) -> List[User]:
    """Create the three demo accounts; existing accounts are left untouched."""
    users = []
    for account in DEMO_USERS:
        user = db.query(User).filter(User.email == account["email"]).first()
        if user:
            logger.info("Demo user %s already exists", account["email"])
        else:
            fields = {key: value for key, value in account.items() if key != "password"}
            user = User(hashed_password=get_password_hash(account["password"]), **fields)
            db.add(user)
            logger.info("Created demo user %s (%s)", account["email"], account["role"].value)
        users.append(user)

    db.commit()
    for user in users:
        db.refresh(user)
    return users
