import time

from flakeid import new, new2


def run(label: str, next_id, n: int = 200_000) -> None:
    start = time.perf_counter()
    for _ in range(n):
        next_id()
    elapsed = time.perf_counter() - start
    print(f"{label}: {n} IDs in {elapsed:.3f}s ({elapsed / n * 1e9:.0f} ns/op)")


if __name__ == "__main__":
    run("single field", new(1).next_id)
    run("dual field", new2(1, 1).next_id)
