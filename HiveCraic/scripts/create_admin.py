# Run from the HiveCraic directory:
#   python -m scripts.create_admin --email admin@example.com --password admin123 --full-name "Admin"
#
# Needs DATABASE_URL / SECRET_KEY in .env. Creates the tables if missing,
# then creates the user or promotes the existing one to Admin.

from argparse import ArgumentParser
from sqlalchemy.orm import Session

from enums.roles import Role
from models.user import UserProfile
from utils.security import hash_password
from utils.transactions import uow


def upsert_admin(db: Session, *, email: str, password: str, full_name: str | None) -> UserProfile:
    email = email.strip().lower()
    user = db.query(UserProfile).filter(UserProfile.email == email).first()

    if user:
        user.full_name = full_name or user.full_name
        user.password_hash = hash_password(password)
        user.status = "a"
        user.role = Role.admin.value
        db.flush()
        print(f"[OK] Admin updated: user_id={user.user_id}, email={user.email}")
        return user

    user = UserProfile(
        email=email,
        full_name=full_name,
        password_hash=hash_password(password),
        role=Role.admin.value,
        status="a",
    )
    db.add(user)
    db.flush()
    print(f"[OK] Admin created: user_id={user.user_id}, email={user.email}")
    return user


def main():
    ap = ArgumentParser(description="Create or promote a Hive Craic admin")
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", required=True)
    ap.add_argument("--full-name", default=None)
    args = ap.parse_args()

    if len(args.password) < 6:
        ap.error("password must have at least 6 characters")

    with uow(create_tables=True) as db:
        upsert_admin(db, email=args.email, password=args.password, full_name=args.full_name)


if __name__ == "__main__":
    main()
