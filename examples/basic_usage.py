#!/usr/bin/env python3
"""Basic usage example

Run with e.g. ``DEBUG="app:*,-app:db" python examples/basic_usage.py``
"""

import time

from debug_module import debug

log = debug("app")
http = log.child("http")
db = log.child("db")


def main():
    log("starting, enabled=%s", log.enabled)
    http.printf("listening on %s:%d", "127.0.0.1", 8080)
    db.print("connection pool ready")  # excluded above

    time.sleep(0.05)
    http.println("GET", "/health", 200)

    time.sleep(1.1)
    http("request took %.1fs", 1.1)


if __name__ == "__main__":
    main()
