"""
Toy service for ctxerr

What this shows:
- default constructor recording file / function / line
- decoration with info and codes
- wrapping plain exceptions and structured errors
- decoding error text received from elsewhere
- aggregating failures in an ErrorList
- debug traces controlled from the environment (CTXERR_DEBUG=1)
"""

from __future__ import annotations

import json
from typing import Dict

from dotenv import load_dotenv

import ctxerr

load_dotenv()


def read_quota(user: str) -> Dict[str, int]:
    """Fails for unknown users with a plain exception."""
    quotas = {"alice": 10, "bob": 0}
    if user not in quotas:
        raise KeyError(f"no quota for {user}")
    return {"quota": quotas[user]}


def reserve(user: str) -> None:
    """Raises a structured error describing why the reservation failed."""
    try:
        quota = read_quota(user)
    except KeyError as e:
        raise ctxerr.new("reservation failed").add_info("user", user).set_code(404).wrap(e)
    if quota["quota"] == 0:
        raise ctxerr.new("quota exhausted").add_info("user", user).set_code(429)


def main() -> None:
    ctxerr.DEBUG.load_env()

    failures = ctxerr.ErrorList()
    for user in ("alice", "bob", "carol"):
        try:
            reserve(user)
            print(f"Reserved for {user}")
        except ctxerr.Error as e:
            print(f"\nReservation for {user} failed (code {e.code}):")
            print(e)
            failures.add(e)

    # Text crossing a process boundary comes back as a structured error
    received = ctxerr.from_json(json.dumps({"ErrorCause": "remote says no", "ErrorInfo": {"Code": 503}}))
    print(f"\nDecoded remote error: {received.cause()!r}, 503? {received.matches_code(503)}")

    if not failures.is_empty():
        print(f"\n{sum(1 for _ in failures)} reservation(s) failed")
        for e in failures:
            if ctxerr.has_code(e, 429):
                print(f"Retry later: {ctxerr.as_error(e).cause()}")


if __name__ == "__main__":
    main()
