"""Generate the sample level pack under `tests/assets/`.

Contract
- Output: `<repo>/tests/assets/levels.dat` (or the path given as argv[1]).
- 100 levels (the minimum a pack may hold), cycling through a few small layouts.
- Header checksum is the byte sum of everything after the header, mod 2**32;
  the loader does not check it unless a verifier is passed.
- LF line endings.

Usage:
    python scripts/generate_sample_pack.py [out_path]

This script is deterministic.
"""

from __future__ import annotations

import sys
from pathlib import Path

from mushman.levels.parse import HEADER, MIN_LEVELS

AUTHOR = "mushman"

LAYOUTS: tuple[tuple[str, ...], ...] = (
    ("wwwwww", "ws f w", "w  ~ew", "wwwwww"),
    ("iiiiii", "is k i", "i l ei", "iiiiii"),
    ("wwwwwww", "ws b  w", "w d  ew", "wwwwwww"),
    # Last row is short on purpose; the loader pads it.
    ("wwwwww", "wsjg w", "w   ew", "wwww"),
)


def byte_sum_checksum(body: bytes) -> int:
    return sum(body) % 2**32


def build_body(*, count: int = MIN_LEVELS) -> bytes:
    blocks: list[str] = []
    for n in range(1, count + 1):
        rows = LAYOUTS[(n - 1) % len(LAYOUTS)]
        blocks.append("\n".join([f"Sample {n:03d}", AUTHOR, *rows]) + "\n\n")
    return "".join(blocks).encode("ascii")


def build_pack(*, count: int = MIN_LEVELS) -> bytes:
    body = build_body(count=count)
    return HEADER + b"\n" + str(byte_sum_checksum(body)).encode("ascii") + b"\n\n" + body


def main() -> None:
    repo = Path(__file__).resolve().parents[1]
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else repo / "tests" / "assets" / "levels.dat"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(build_pack())
    print(f"Wrote {out}")


if __name__ == "__main__":
    main()
