"""
Parsing with Either: capture failures as values, recover, and trace.

Run: python examples/parse_config.py
"""
import asyncio

from eitherpy import ConsoleLogger, attempt, from_async, log_left, log_right


log = ConsoleLogger("example", level="DEBUG")


def parse_port(raw: str):
    return (
        attempt(lambda: int(raw))
        .left_map(lambda ex: f"not a number: {raw!r}")
        .flat_map(lambda p: attempt(lambda: _check_range(p)).left_map(str))
        .trace(log_left(log, "rejected port", level="WARN"), log_right(log, "parsed port"))
    )


def _check_range(p: int) -> int:
    if not 0 < p < 65536:
        raise ValueError(f"out of range: {p}")
    return p


async def fetch_port() -> int:
    await asyncio.sleep(0)
    return 8080


async def main():
    for raw in ("8000", "http", "70000"):
        e = parse_port(raw)
        print(raw, "=>", e, "->", e.fold_left(lambda _: 80))    # Right(8000) / Left(...) -> 80

    fetched = await from_async(fetch_port)
    print("fetched =>", fetched.swap())                         # Left(8080)


if __name__ == "__main__":
    asyncio.run(main())
