from __future__ import annotations

import os

from loguru import logger

from perhaps import Holder, Maybe, absent, configure_logging, present
from perhaps.lookup import first, get, parse_int

DEFAULT_PORT = 8080


def port_from_env(environ: dict[str, str]) -> Maybe[int]:
    return get(environ, "PORT").and_then(parse_int).filter(lambda p: 0 < p < 65536)


def pick_host(candidates: list[str]) -> Maybe[str]:
    return first(candidates, lambda h: not h.startswith("#"))


def run_demo():
    configure_logging()
    port = port_from_env(dict(os.environ)).or_else(DEFAULT_PORT)
    logger.info("Resolved port={port}", port=port)

    holder = Holder()
    if pick_host(["# disabled", "db.internal", "db.backup"]).extract_into(holder):
        logger.info("Resolved host={host}", host=holder.value)

    for candidate in (present("42"), present("nope"), absent()):
        print(candidate, "->", candidate.and_then(parse_int))


if __name__ == "__main__":
    run_demo()
