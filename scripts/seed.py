#!/usr/bin/env python3
"""Create the demo admin, manager and employee accounts."""
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from traininghub.core.config import get_settings
from traininghub.core.database import Database
from traininghub.seed import seed_demo_users, DEMO_USERS


def main():
    """Seed demo users into the configured database."""
    database = Database.from_settings(get_settings())
    db = database.session()
    try:
        users = seed_demo_users(db)

        print("✅ Seeded users:")
        passwords = {account["email"]: account["password"] for account in DEMO_USERS}
        for user in users:
            print(f"   {user.role.value:<8} {user.email}  password: {passwords[user.email]}")
        print("\n⚠️  Demo credentials only, never use them in production\n")

    except Exception as e:
        print(f"❌ Error: {str(e)}")
        db.rollback()
        raise
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    main()
