#!/usr/bin/env python3
"""
Basic usage examples for the Carrot client library.

This script validates (and if needed creates) a user, then posts an
achievement, a high score, an action and a like.

Usage:
    example_usage.py APP_ID APP_SECRET USER_ID [ACCESS_TOKEN] [HOSTNAME]
"""

import logging
import sys

from carrot import (
    Carrot,
    CarrotError,
    CreationOutcome,
    LikeObjectType,
    PostOutcome,
    ValidationOutcome
)


def main():
    """Run basic usage examples."""
    if len(sys.argv) < 4:
        print(__doc__)
        return 1

    logging.basicConfig(level=logging.INFO)

    app_id, app_secret, user_id = sys.argv[1:4]
    access_token = sys.argv[4] if len(sys.argv) > 4 else None
    hostname = sys.argv[5] if len(sys.argv) > 5 else "gocarrot.com"

    print("=== Carrot Client Basic Usage Examples ===\n")

    with Carrot(app_id, app_secret, user_id, hostname, timeout=10) as client:
        print(f"1. Client created for: {client.base_url}")
        print(f"   App secret: {app_secret[:4]}...\n")

        try:
            print("2. Validating user...")
            status = client.validate_user()
            print(f"   Validation: {status.value}\n")

            if status is ValidationOutcome.NOT_CREATED:
                if not access_token:
                    print("   ✗ User not created and no access token given")
                    return 1
                print("3. Creating user...")
                created = client.create_user(access_token)
                print(f"   Creation: {created.value}\n")
                if created is not CreationOutcome.AUTHORIZED:
                    return 1

            print("4. Posting signed requests...")
            results = {
                "achievement": client.post_achievement("first_blood"),
                "highscore": client.post_highscore(1200),
                "action": client.post_action("level_up", None, {'level': 2}),
                "like": client.post_like(LikeObjectType.GAME),
            }
            for name, outcome in results.items():
                mark = "✓" if outcome is PostOutcome.SUCCESS else "✗"
                print(f"   {mark} {name}: {outcome.value}")

        except CarrotError as e:
            print(f"   ✗ Request failed: {e}")
            return 1

    print("\n=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
