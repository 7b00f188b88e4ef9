"""Print a signed API token.

Usage:
    python create_token.py admin@ucsb.edu --admin --days 365

The token is signed with ``SECRET_KEY`` from the environment, so run
this with the same value the server uses.
"""
import argparse

from campus_api.app.core.security import ROLE_ADMIN, create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", help="subject of the token")
    parser.add_argument("--admin", action="store_true", help="grant the ADMIN role")
    parser.add_argument("--days", type=int, default=365, help="token lifetime in days")
    args = parser.parse_args()

    roles = [ROLE_ADMIN] if args.admin else []
    print(create_access_token(args.email, roles=roles, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
