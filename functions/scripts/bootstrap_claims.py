#!/usr/bin/env python3
"""
One-time script that copies the role stored in each users document onto the
account's custom claims, for accounts created before roles were enforced
through claims.

Run from the functions directory:
    python -m scripts.bootstrap_claims --credentials path/to/service-account.json

Without --credentials the Application Default Credentials are used. Set
FIRESTORE_EMULATOR_HOST and FIREBASE_AUTH_EMULATOR_HOST to target the emulators.
"""

import argparse
import sys

import firebase_admin
from admins.sync_claims import sync_role_claims
from firebase_admin import credentials, firestore
from utils.logging_utils import get_logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Set custom claims for existing admins and super admins"
    )
    parser.add_argument(
        "--credentials",
        help="Path to a service account JSON file",
        default=None,
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    logger = get_logger(__name__)
    args = parse_args(argv)

    if args.credentials:
        firebase_admin.initialize_app(credentials.Certificate(args.credentials))
    else:
        firebase_admin.initialize_app()

    logger.info("Starting custom claims bootstrap")
    try:
        sync_role_claims(firestore.client())
    except Exception as e:
        logger.error(f"Custom claims bootstrap failed: {str(e)}")
        return 1

    logger.info(
        "All users must sign out and sign back in for claims to take effect"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
