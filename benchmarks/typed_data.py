"""
Benchmark Keccak-256 and EIP-712 hashing: time per call and peak memory
(tracemalloc) per run.

Run from repo root after pip install -e .:

  python benchmarks/typed_data.py
"""

from __future__ import annotations

import time
import tracemalloc

from typedhash import hash_typed_data, keccak256

KECCAK_SAMPLES = [
    (b"", "empty"),
    (b"hello", "short"),
    (b"x" * 136, "136 B"),
    (b"x" * 1024, "1 KiB"),
]

DOMAIN = {
    "name": "Bench",
    "version": "1",
    "chainId": 1,
    "verifyingContract": "0x" + "00" * 20,
}
TYPES = {
    "Person": [
        {"name": "name", "type": "string"},
        {"name": "wallet", "type": "address"},
    ],
    "Group": [
        {"name": "owner", "type": "Person"},
        {"name": "members", "type": "Person[]"},
        {"name": "weights", "type": "uint256[]"},
    ],
}
MESSAGE = {
    "owner": {"name": "Owner", "wallet": "0x" + "11" * 20},
    "members": [{"name": f"m{i}", "wallet": "0x" + "22" * 20} for i in range(8)],
    "weights": list(range(8)),
}

N_TIME = 200
N_MEM = 50


def _time_per_call(fn, n: int = N_TIME, warmup: int = 10) -> float:
    for _ in range(warmup):
        fn()
    start = time.perf_counter()
    for _ in range(n):
        fn()
    return (time.perf_counter() - start) / n


def _peak_memory_kb(fn, n: int = N_MEM) -> float:
    tracemalloc.start()
    for _ in range(n):
        fn()
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    print(f"{'case':<24} {'us/call':>10} {'peak KiB':>10}")
    for data, label in KECCAK_SAMPLES:
        fn = lambda data=data: keccak256(data)  # noqa: E731
        us = _time_per_call(fn) * 1e6
        print(f"{'keccak256 ' + label:<24} {us:>10.1f} {_peak_memory_kb(fn):>10.1f}")

    fn = lambda: hash_typed_data(DOMAIN, TYPES, "Group", MESSAGE)  # noqa: E731
    us = _time_per_call(fn, n=N_TIME // 10) * 1e6
    print(f"{'hash_typed_data Group':<24} {us:>10.1f} {_peak_memory_kb(fn):>10.1f}")


if __name__ == "__main__":
    main()
