# Run from the HiveCraic directory (e.g. daily from cron):
#   python -m scripts.cleanup_reset_tokens
#
# Deletes password reset tokens that expired more than a week ago.

from services.password_reset_service import cleanup_expired_tokens
from utils.transactions import uow


def main():
    with uow() as db:
        deleted = cleanup_expired_tokens(db)
    print(f"[OK] {deleted} expired reset tokens deleted")


if __name__ == "__main__":
    main()
