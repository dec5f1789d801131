"""Print a long-lived administrator token.

The token is signed with the ``SECRET_KEY`` of the current environment,
so run this with the same configuration as the server.

Usage:
    python create_token.py --days 365 --username admin
"""
import argparse

from blog_api.app.core.config import settings
from blog_api.app.core.security import create_admin_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Issue a Blog API administrator token.")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days (default: 365)")
    ap.add_argument("--username", default=settings.admin_username, help="Token subject")
    args = ap.parse_args()
    print(create_admin_token(1, args.username, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
