import logging
import threading
import time
from datetime import datetime, timezone

import pytest

from flakeid import DualFieldGenerator, SingleFieldGenerator, new, new2, parse, parse2, set_epoch
from flakeid.core.codec import DUAL_FIELD, SINGLE_FIELD, BitLayout
from flakeid.core.id_generator import Generator

N = 100_000


@pytest.mark.parametrize("factory", [lambda: new(1), lambda: new2(1, 1)])
def test_next_id_unique(factory):
    sf = factory()
    ids = {sf.next_id() for _ in range(N)}
    assert len(ids) == N


@pytest.mark.parametrize("factory", [lambda: new(1), lambda: new2(1, 1)])
def test_next_id_unique_concurrent(factory):
    sf = factory()
    workers = 10
    results = [[] for _ in range(workers)]

    def work(out):
        for _ in range(N // workers):
            out.append(sf.next_id())

    threads = [threading.Thread(target=work, args=(out,)) for out in results]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [sid for out in results for sid in out]
    assert len(ids) == N
    assert len(set(ids)) == N


@pytest.mark.parametrize("factory", [lambda: new(1), lambda: new2(1, 2)])
def test_next_id_is_increasing(factory):
    sf = factory()
    ids = [sf.next_id() for _ in range(N)]
    assert all(a <= b for a, b in zip(ids, ids[1:]))


def test_next_id_fits_in_64_bits():
    sid = new(1023).next_id()
    assert 0 <= sid < (1 << 64)


@pytest.mark.parametrize("factory, parser", [(new, parse), (lambda d: new2(d, d), parse2)])
def test_sequence_within_one_millisecond(scripted_clock, factory, parser):
    sf = factory(1)
    sf._clock = scripted_clock([100, 100, 100, 101])

    assert [parser(sf.next_id()).sequence for _ in range(3)] == [0, 1, 2]
    assert parser(sf.next_id()).sequence == 0


def test_sequence_resets_after_sleep():
    sf = new(1)
    sf.next_id()
    time.sleep(0.1)
    assert parse(sf.next_id()).sequence == 0


def test_sequence_exhaustion_advances_to_next_millisecond(scripted_clock):
    clock = scripted_clock([5])
    sf = SingleFieldGenerator(1, clock=clock)

    ids = [sf.next_id() for _ in range(4096)]
    assert [sid & 0xFFF for sid in ids] == list(range(4096))
    assert {sid >> 22 for sid in ids} == {5}

    sid = sf.next_id()
    assert sid >> 22 == 6
    assert sid & 0xFFF == 0
    assert sid > ids[-1]
    assert clock.reads == 4097


def test_stalled_clock_keeps_advancing_without_repeats(scripted_clock):
    sf = SingleFieldGenerator(1, clock=scripted_clock([5]))

    ids = [sf.next_id() for _ in range(3 * 4096 + 1)]
    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)
    assert [sid >> 22 for sid in ids[::4096]] == [5, 6, 7, 8]


def test_next_id_does_not_block_after_forward_epoch_change():
    set_epoch(datetime(2010, 1, 1, tzinfo=timezone.utc))
    sf = new(1)
    ids = [sf.next_id()]
    set_epoch(datetime(2012, 3, 28, tzinfo=timezone.utc))

    worker = threading.Thread(
        target=lambda: ids.extend(sf.next_id() for _ in range(5000)), daemon=True
    )
    worker.start()
    worker.join(timeout=2)

    assert not worker.is_alive()
    assert len(ids) == 5001
    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_clock_rollback_keeps_last_timestamp(scripted_clock):
    clock = scripted_clock([10, 10, 7, 11])
    sf = SingleFieldGenerator(1, clock=clock)

    ids = [sf.next_id() for _ in range(4)]
    assert [(sid >> 22, sid & 0xFFF) for sid in ids] == [(10, 0), (10, 1), (10, 2), (11, 0)]
    assert ids == sorted(ids)


@pytest.mark.parametrize(
    "discriminator, expected", [(1, 1), (100, 100), (1000, 1000), (1023, 1023), (1024, 0)]
)
def test_discriminator(discriminator, expected):
    assert parse(new(discriminator).next_id()).discriminator == expected


@pytest.mark.parametrize(
    "discriminators, expected",
    [((1, 1), (1, 1)), ((10, 10), (10, 10)), ((31, 31), (31, 31)), ((32, 32), (0, 0))],
)
def test_two_discriminators(discriminators, expected):
    parsed = parse2(new2(*discriminators).next_id())
    assert (parsed.discriminator1, parsed.discriminator2) == expected


def test_out_of_range_discriminator_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="flakeid"):
        new(1024)
    assert "encoded as 0" in caplog.text


def test_generator_attributes():
    sf = SingleFieldGenerator(7)
    assert sf.layout == SINGLE_FIELD
    assert sf.discriminator == 7
    assert sf.discriminators == (7,)
    assert repr(sf) == "SingleFieldGenerator(7,)"

    sf2 = DualFieldGenerator(3, 4)
    assert sf2.layout == DUAL_FIELD
    assert sf2.discriminators == (3, 4)


def test_generator_rejects_wrong_discriminator_count():
    with pytest.raises(ValueError):
        Generator(BitLayout((5, 5)), (1,))


def test_generator_reads_current_epoch():
    sf = new(1)
    before = sf.next_id()
    set_epoch(datetime(2010, 1, 1, tzinfo=timezone.utc))
    after = sf.next_id()

    assert after > before
    assert abs(parse(after).timestamp - time.time() * 1000) < 5000


def test_instances_share_no_state():
    a, b = new(1), new(2)
    assert parse(a.next_id()).sequence == 0
    assert parse(b.next_id()).sequence == 0
