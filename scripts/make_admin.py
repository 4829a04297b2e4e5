"""Promote an existing account to administrator.

Usage: python scripts/make_admin.py someone@example.com
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classbook import create_app
from classbook.errors import NotFound
from classbook.services.accounts import promote_to_admin


def main(argv):
    if len(argv) != 2:
        print(__doc__.strip().splitlines()[-1])
        return 2

    app = create_app()
    with app.app_context():
        try:
            user = promote_to_admin(argv[1])
        except NotFound as e:
            print(f'Error updating user: {e.message}')
            return 1
    print(f'User updated successfully: {user.email} -> {user.role}')
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
