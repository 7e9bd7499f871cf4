from __future__ import annotations

import logging

from errchain import Kind, Op, Severity, dominant_kind, is_kind, log_error, new, ops

USERS = {"u1": "Ada"}


def load_user(user_id: str) -> str:
    try:
        return USERS[user_id]
    except KeyError as exc:
        raise new(Op("store.Get"), Kind.NOT_FOUND, Severity.WARN, exc) from exc


def get_profile(user_id: str) -> str:
    try:
        return f"profile of {load_user(user_id)}"
    except Exception as exc:
        raise new(Op("api.GetProfile"), exc) from exc


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    try:
        get_profile("u2")
    except Exception as exc:
        print("ops:", ops(exc))
        print("kind:", dominant_kind(exc))
        print("not found:", is_kind(Kind.NOT_FOUND, exc))
        log_error(exc)


if __name__ == "__main__":
    main()
