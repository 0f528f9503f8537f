from __future__ import annotations

import asyncio

from utils.keyed_lock import KeyedLock


def test_same_key_is_serialized():
    locks = KeyedLock()
    events = []

    async def worker(name):
        async with locks.hold("recipe"):
            events.append(f"{name}-in")
            await asyncio.sleep(0.01)
            events.append(f"{name}-out")

    async def main():
        await asyncio.gather(worker("a"), worker("b"), worker("c"))

    asyncio.run(main())
    # No interleaving: every "in" is immediately followed by its "out"
    for i in range(0, len(events), 2):
        assert events[i].split("-")[0] == events[i + 1].split("-")[0]
    assert len(locks) == 0


def test_different_keys_run_concurrently():
    locks = KeyedLock()
    inside = []
    peak = []

    async def worker(key):
        async with locks.hold(key):
            inside.append(key)
            peak.append(len(inside))
            await asyncio.sleep(0.01)
            inside.remove(key)

    async def main():
        await asyncio.gather(worker("r1"), worker("r2"))

    asyncio.run(main())
    assert max(peak) == 2
    assert len(locks) == 0


def test_lock_released_after_error():
    locks = KeyedLock()

    async def main():
        try:
            async with locks.hold("recipe"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        async with locks.hold("recipe"):
            return True

    assert asyncio.run(main()) is True
    assert len(locks) == 0
