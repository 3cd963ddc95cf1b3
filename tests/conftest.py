import threading
import time
from typing import Callable

import pytest

from singleton_dp.internal.holder import LazyHolder


class Payload:
    pass


class CountingFactory:
    """
    Фабрика для тестов: считает, сколько раз ее вызвали.
    delay растягивает конструирование, чтобы потоки успели столкнуться.
    """

    def __init__(self, delay: float = 0.0) -> None:
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self) -> Payload:
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        return Payload()


@pytest.fixture
def counting_factory() -> CountingFactory:
    return CountingFactory()


@pytest.fixture
def slow_factory() -> CountingFactory:
    return CountingFactory(delay=0.05)


@pytest.fixture
def holder(counting_factory: CountingFactory) -> LazyHolder[Payload]:
    return LazyHolder(counting_factory, name="payload")


@pytest.fixture
def run_concurrently() -> Callable[[Callable[[], object], int], list[object]]:
    """Вызывает target из count потоков одновременно и возвращает все результаты."""

    def run(target: Callable[[], object], count: int) -> list[object]:
        barrier = threading.Barrier(count)
        results: list[object] = [None] * count
        errors: list[BaseException] = []

        def worker(index: int) -> None:
            barrier.wait()
            try:
                results[index] = target()
            except BaseException as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)
            if thread.is_alive():
                raise AssertionError(f"Thread {thread.name} did not finish")

        if errors:
            raise errors[0]
        return results

    return run
