"""
Basic options: construction, fallbacks, fallible mapping and combination.

Run: python examples/basic_options.py
"""
from optionpy import (
    some,
    none,
    from_nullable,
    attempt,
    map,
    try_map,
    unwrap_or,
    unwrap_or_default,
    or_else,
    xor,
    filter,
)


def main():
    config = {"port": "8080", "host": "", "retries": "three"}

    # Absence without sentinels: from_nullable + map + unwrap_or
    port = map(from_nullable(config.get("port")), int)
    timeout = map(from_nullable(config.get("timeout")), float)
    print("port =>", unwrap_or(port, 80))            # 8080
    print("timeout =>", unwrap_or(timeout, 30.0))    # 30.0

    # Empty strings filtered away, then a lazy fallback
    host = or_else(filter(from_nullable(config.get("host")), bool), lambda: some("localhost"))
    print("host =>", unwrap_or_default(host))        # localhost

    # Fallible mapping through the Result channel
    retries = try_map(from_nullable(config.get("retries")), attempt(int, ValueError))
    print("retries =>", retries)                     # Err(error=ValueError(...))

    # Exactly one of two sources
    print("xor =>", xor(none(str), some("env")))     # Some(value='env')


if __name__ == "__main__":
    main()
