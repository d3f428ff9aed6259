from jsondir.locks import CollectionLocks
from threading import Thread, Barrier


def test_lock_for_same_collection():
    locks = CollectionLocks()

    assert locks.lock_for('users') is locks.lock_for('users')
    assert 'users' in locks
    assert len(locks) == 1


def test_lock_for_different_collections():
    locks = CollectionLocks()

    users = locks.lock_for('users')
    orders = locks.lock_for('orders')

    assert users is not orders
    assert len(locks) == 2

    with users:
        # a held lock on one collection does not block another
        assert orders.acquire(blocking=False)
        orders.release()


def test_lock_for_concurrent_first_access():
    locks = CollectionLocks()
    total = 16
    barrier = Barrier(total)
    found = []

    def get_lock():
        barrier.wait()
        found.append(locks.lock_for('users'))

    threads = [Thread(target=get_lock) for _ in range(total)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(found) == total
    assert len({id(lock) for lock in found}) == 1
    assert len(locks) == 1


def test_separate_registries():
    assert CollectionLocks().lock_for('users') is not CollectionLocks().lock_for('users')
