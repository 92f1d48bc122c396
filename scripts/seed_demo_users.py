#!/usr/bin/env python3
"""Seed demo users into a running API.

Users live in server memory, so seeding goes through the HTTP API rather
than touching storage directly. Re-running is safe: existing users are
reported and skipped.

Usage:
    # From project root with the server running:
    python scripts/seed_demo_users.py

    # Against another host:
    API_URL=http://localhost:3001 python scripts/seed_demo_users.py
"""

import os
import sys

import httpx

API_URL = os.getenv("API_URL", "http://localhost:3001")

# Demo user credentials
DEMO_USERS = [
    {"email": "demo@example.com", "password": "demopass123", "name": "Demo User"},
    {"email": "video.creator@example.com", "password": "creatorpass123", "name": "Video Creator"},
    {"email": "lead.genius@example.com", "password": "geniuspass123"},
]


def seed_demo_users(client: httpx.Client) -> int:
    """Register each demo user, returning how many were created."""
    created = 0
    for user in DEMO_USERS:
        response = client.post("/api/auth/register", json=user)
        if response.status_code == 201:
            data = response.json()
            print(f"Created {data['user']['email']} (ID: {data['user']['id']})")
            created += 1
        elif response.status_code == 409:
            print(f"Skipped {user['email']}: already exists")
        else:
            response.raise_for_status()
    return created


def main() -> int:
    try:
        with httpx.Client(base_url=API_URL, timeout=30.0) as client:
            created = seed_demo_users(client)
    except httpx.HTTPError as e:
        print(f"Seeding failed: {e}", file=sys.stderr)
        return 1

    print(f"\nDone. {created} demo user(s) created.")
    print(f"Login with: {DEMO_USERS[0]['email']} / {DEMO_USERS[0]['password']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
