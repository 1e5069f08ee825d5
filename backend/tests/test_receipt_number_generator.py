"""
Tests for ReceiptNumberGenerator

Tests cover:
- Fixed-width RR- format and cold start
- Monotonic numbering and uniqueness under concurrent callers
- Lock timeout and store failures abort without touching the counter
- An expired lease fails the caller instead of issuing a duplicate
- Overflow bounds check and counter TTL
"""

import asyncio

import pytest
from fakeredis import FakeAsyncRedis, FakeServer

from app.config import settings
from app.services.receipts import (
    InMemoryCounterStore,
    LockTimeout,
    ReceiptLockLost,
    ReceiptNumberGenerator,
    ReceiptNumberOverflow,
    ReceiptStoreUnavailable,
    RedisCounterStore,
    RedisLockService,
    format_receipt_number,
    is_receipt_number,
    parse_receipt_number,
)
from app.services.receipts.generator import MAX_SEQUENCE_VALUE, RECEIPT_NUMBER_PATTERN
from app.utils.redis_lock import RedisLock
from tests.factories import COUNTER_KEY, LOCK_NAME


class TestReceiptNumberFormat:
    """Tests for formatting and parsing helpers."""

    def test_first_value_is_zero_padded(self):
        assert format_receipt_number(1) == "RR-000000000001"

    def test_full_width_value(self):
        assert format_receipt_number(123456789012) == "RR-123456789012"

    def test_value_wider_than_twelve_digits_is_rejected(self):
        with pytest.raises(ReceiptNumberOverflow):
            format_receipt_number(MAX_SEQUENCE_VALUE + 1)

    def test_parse_returns_embedded_value(self):
        assert parse_receipt_number("RR-000000000042") == 42

    @pytest.mark.parametrize("text", ["RR-1", "invalid-identifier", "RR-0000000000001", "rr-000000000001"])
    def test_rejects_malformed_numbers(self, text):
        assert not is_receipt_number(text)
        with pytest.raises(ValueError):
            parse_receipt_number(text)


class TestReceiptNumberGenerator:
    """Tests for generation against a (fake) Redis lock and counter."""

    async def test_cold_start_returns_first_number(self, generator):
        assert await generator.generate() == "RR-000000000001"

    async def test_sequential_calls_strictly_increase(self, generator):
        numbers = [await generator.generate() for _ in range(20)]

        values = [parse_receipt_number(n) for n in numbers]
        assert values == list(range(1, 21))

    async def test_counter_is_persisted(self, generator, redis):
        for _ in range(3):
            await generator.generate()

        assert int(await redis.get(COUNTER_KEY)) == 3

    async def test_continues_from_stored_counter(self, generator, redis):
        await redis.set(COUNTER_KEY, 41)

        assert await generator.generate() == "RR-000000000042"

    async def test_lock_is_released_after_generation(self, generator, redis):
        await generator.generate()

        assert await redis.exists(f"RedisLock:{LOCK_NAME}") == 0

    async def test_concurrent_calls_yield_unique_numbers(self, redis):
        generator = ReceiptNumberGenerator(
            RedisLockService(redis, poll_interval=0.001),
            RedisCounterStore(redis),
            lock_name=LOCK_NAME,
            counter_key=COUNTER_KEY,
            wait=60.0,
        )

        numbers = await asyncio.gather(*(generator.generate() for _ in range(200)))

        assert len(set(numbers)) == 200
        assert all(RECEIPT_NUMBER_PATTERN.match(n) for n in numbers)
        assert sorted(parse_receipt_number(n) for n in numbers) == list(range(1, 201))
        assert int(await redis.get(COUNTER_KEY)) == 200

    async def test_concurrent_callers_on_separate_clients_yield_unique_numbers(self, redis_server: FakeServer):
        # One client and generator per simulated API instance, all on one Redis
        clients = [FakeAsyncRedis(server=redis_server) for _ in range(4)]
        generators = [
            ReceiptNumberGenerator(
                RedisLockService(client, poll_interval=0.001),
                RedisCounterStore(client),
                lock_name=LOCK_NAME,
                counter_key=COUNTER_KEY,
                wait=60.0,
            )
            for client in clients
        ]

        try:
            numbers = await asyncio.gather(*(generators[i % len(generators)].generate() for i in range(200)))
            stored = int(await clients[0].get(COUNTER_KEY))
        finally:
            for client in clients:
                await client.aclose()

        assert len(set(numbers)) == 200
        assert sorted(parse_receipt_number(n) for n in numbers) == list(range(1, 201))
        assert stored == 200

    async def test_expired_lease_fails_instead_of_issuing_duplicates(self, redis):
        class SlowCounterStore(RedisCounterStore):
            async def get(self, key, default=0):
                await asyncio.sleep(0.2)
                return await super().get(key, default)

        generator = ReceiptNumberGenerator(
            RedisLockService(redis, poll_interval=0.005),
            SlowCounterStore(redis),
            lock_name=LOCK_NAME,
            counter_key=COUNTER_KEY,
            lease=0.05,
            wait=3.0,
        )

        results = await asyncio.gather(generator.generate(), generator.generate(), return_exceptions=True)

        # Both leases ran out mid read-write: neither caller may get a number
        assert all(isinstance(r, ReceiptLockLost) for r in results)
        assert await redis.get(COUNTER_KEY) is None

    async def test_lease_lost_after_write_still_fails(self, redis):
        class SlowWriteCounterStore(RedisCounterStore):
            async def set(self, key, value, ttl=None):
                await super().set(key, value, ttl)
                await asyncio.sleep(0.1)

        generator = ReceiptNumberGenerator(
            RedisLockService(redis, poll_interval=0.005),
            SlowWriteCounterStore(redis),
            lock_name=LOCK_NAME,
            counter_key=COUNTER_KEY,
            lease=0.05,
        )

        with pytest.raises(ReceiptLockLost):
            await generator.generate()
        # The value is consumed (a gap), never handed out
        assert await generator.counter_store.get(COUNTER_KEY) == 1

    async def test_lock_timeout_propagates_without_mutation(self, generator, redis):
        await redis.set(COUNTER_KEY, 7)
        generator.wait = 0.1

        async with RedisLock(LOCK_NAME, ttl=10, client=redis):
            with pytest.raises(LockTimeout):
                await generator.generate()

        assert int(await redis.get(COUNTER_KEY)) == 7

    async def test_expired_holder_does_not_block_forever(self, generator, redis):
        # Simulates a crashed holder: never released, only the lease ends it
        async with RedisLock(LOCK_NAME, ttl=0.05, auto_release=False, client=redis):
            pass

        assert await generator.generate() == "RR-000000000001"

    async def test_unreachable_store_fails_generation(self, generator, redis_server: FakeServer):
        redis_server.connected = False

        with pytest.raises(ReceiptStoreUnavailable):
            await generator.generate()

    async def test_counter_write_failure_releases_lock(self, redis):
        class BrokenCounterStore(InMemoryCounterStore):
            async def set(self, key, value, ttl=None):
                raise ReceiptStoreUnavailable("write failed")

        generator = ReceiptNumberGenerator(
            RedisLockService(redis, poll_interval=0.005),
            BrokenCounterStore(),
            lock_name=LOCK_NAME,
            counter_key=COUNTER_KEY,
        )

        with pytest.raises(ReceiptStoreUnavailable):
            await generator.generate()
        assert await redis.exists(f"RedisLock:{LOCK_NAME}") == 0

    async def test_last_twelve_digit_value_is_issued(self, generator, redis):
        await redis.set(COUNTER_KEY, MAX_SEQUENCE_VALUE - 1)

        assert await generator.generate() == "RR-999999999999"

    async def test_overflow_aborts_without_mutation(self, generator, redis):
        await redis.set(COUNTER_KEY, MAX_SEQUENCE_VALUE)

        with pytest.raises(ReceiptNumberOverflow):
            await generator.generate()
        assert int(await redis.get(COUNTER_KEY)) == MAX_SEQUENCE_VALUE

    async def test_counter_has_no_expiry_by_default(self, generator, redis):
        await generator.generate()

        assert await redis.ttl(COUNTER_KEY) == -1

    async def test_counter_ttl_is_refreshed_on_write(self, redis):
        generator = ReceiptNumberGenerator(
            RedisLockService(redis),
            RedisCounterStore(redis),
            lock_name=LOCK_NAME,
            counter_key=COUNTER_KEY,
            counter_ttl=86400,
        )

        await generator.generate()

        assert 0 < await redis.ttl(COUNTER_KEY) <= 86400

    async def test_in_memory_counter_store(self, redis):
        generator = ReceiptNumberGenerator(RedisLockService(redis), InMemoryCounterStore())

        assert [await generator.generate() for _ in range(2)] == ["RR-000000000001", "RR-000000000002"]

    async def test_from_settings(self):
        generator = ReceiptNumberGenerator.from_settings(FakeAsyncRedis(server=FakeServer()))

        assert generator.lock_name == settings.receipt_lock_name
        assert generator.counter_key == settings.receipt_counter_key
        assert generator.lease == settings.receipt_lock_lease_seconds
        assert generator.wait == settings.receipt_lock_wait_seconds
        assert generator.counter_ttl == settings.receipt_counter_ttl_seconds
