import tempfile
import time
from pathlib import Path

import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from coinbook import store
from coinbook.models import Kind, Ledger, Transaction


def build_ledger(n_days: int, events_per_day: int) -> Ledger:
    txns = []
    for day in range(n_days):
        for ev in range(events_per_day):
            kind = Kind.CREDIT if ev % 3 == 0 else Kind.DEBIT
            txns.append(Transaction(note=f"T{day}-{ev}", amount=1.25 * (ev + 1), kind=kind))
    return Ledger(txns)


def run():
    ledger = build_ledger(365 * 5, 10)
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "ledger.json"

        start = time.perf_counter()
        store.save(path, ledger.appended(Transaction("extra", 1.0)))
        save_time = time.perf_counter() - start

        start = time.perf_counter()
        loaded = store.load(path)
        load_time = time.perf_counter() - start

    start = time.perf_counter()
    balance = loaded.balance()
    balance_time = time.perf_counter() - start

    print(f"Saved {len(loaded)} transactions in {save_time:.4f}s")
    print(f"Loaded them in {load_time:.4f}s")
    print(f"Balance {balance:.2f} computed in {balance_time:.4f}s")


if __name__ == "__main__":
    run()
