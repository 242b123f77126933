"""Register a user from the command line.

Usage:
  python scripts/create_user.py --name Alice --email alice@example.com --password '...'

NOTE: This is intended for local/dev.
"""

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from storefront_auth.auth import register_user
from storefront_auth.config import load_config
from storefront_auth.db import init_db
from storefront_auth.errors import AuthError


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--name", required=True)
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", required=True)
    args = ap.parse_args()

    cfg = load_config()
    init_db(cfg.DB_DSN)

    try:
        user_id = register_user(cfg, name=args.name, email=args.email, password=args.password)
    except AuthError as e:
        print(f"Could not create user: {e.message}", file=sys.stderr)
        sys.exit(1)

    print(f"Created user: id={user_id} email={args.email}")


if __name__ == "__main__":
    main()
