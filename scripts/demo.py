#!/usr/bin/env python3
"""
Demo script for the route cache.

This script runs the demo API in-process against a real Redis and shows
misses turning into hits for each cache policy.

Requires Redis on REDIS_URL (default redis://localhost:6379).
"""

import time

from fastapi.testclient import TestClient

from route_cache.api.app import app


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def show(client: TestClient, path: str, **kwargs) -> None:
    """Request a path twice and print the cache status of each response."""
    for attempt in (1, 2):
        start_time = time.time()
        response = client.get(path, **kwargs)
        elapsed_ms = (time.time() - start_time) * 1000
        status = "✓ CACHE HIT" if response.headers.get("x-cache") == "HIT" else "✗ Cache miss"
        print(f"  [{attempt}] GET {path}: {status} ({elapsed_ms:.1f}ms) {response.text[:60]}")


def main() -> None:
    """Run the demo."""
    print_section("Route Cache Demo")

    # Entering the client runs the lifespan, which connects Redis
    with TestClient(app) as client:
        health = client.get("/health")
        if health.status_code != 200:
            print("\n⚠️  Redis is not reachable. Make sure Redis is running: docker compose up -d")
            return

        print_section("always: one entry for every caller")
        show(client, "/users")

        print_section("per-request-url: one entry per URL")
        show(client, f"/search?q=a&nonce={int(time.time())}")

        print_section("per-auth-token: one entry per token")
        show(client, "/profile", headers={"Authorization": f"Bearer demo-{int(time.time())}"})
        show(client, "/profile")

        print_section("per-custom-cookie: one entry per cartId")
        client.cookies.set("cartId", f"cart-{int(time.time())}")
        show(client, "/cart")

        print_section("no policy: never cached")
        show(client, "/time")

    print("\n✓ Demo complete")


if __name__ == "__main__":
    main()
