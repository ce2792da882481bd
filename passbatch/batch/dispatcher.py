# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Fork-join generation and hashing of password batches."""

import logging
import os
from concurrent.futures import (
    FIRST_EXCEPTION,
    Future,
    ThreadPoolExecutor,
    wait,
)
from typing import Callable, Iterable, List, Optional, TypeVar

from ..generation import GeneratedPassword, PasswordPolicy, PolicyGenerator
from ..hashing import HashRecord, Hasher

LOG = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _erase_all(passwords: Iterable[GeneratedPassword]) -> None:
    for password in passwords:
        password.erase()


class BatchDispatcher:
    """Generate and hash a batch of passwords, all or nothing.

    Each stage runs its units on a thread pool. The first failure
    found while collecting a stage's results aborts the batch: units
    not yet started are cancelled, running ones finish, and their
    results are discarded.

    Parameters
    ----------
    hasher : Hasher
        The configured hasher, shared by every hashing unit.
    max_workers : Optional[int], optional
        Pool size, by default the number of CPUs.
    """

    def __init__(
        self, hasher: Hasher, max_workers: Optional[int] = None
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError(
                f"max_workers must be positive, got {max_workers}"
            )
        self.hasher = hasher
        self.max_workers = max_workers or os.cpu_count() or 1

    def run(
        self, batch_size: int, policy: PasswordPolicy
    ) -> List[HashRecord]:
        """Generate ``batch_size`` passwords and hash them.

        Every plaintext is erased before this returns or raises.

        Parameters
        ----------
        batch_size : int
            How many passwords to produce.
        policy : PasswordPolicy
            The policy every password satisfies.

        Returns
        -------
        List[HashRecord]
            One encoded hash per password, in no particular order.

        Raises
        ------
        ValueError
            If the batch size is not positive.
        GenerationError
            If any password could not be generated.
        HashingError
            If any password could not be hashed.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        LOG.debug(
            "Running a batch of %d with %d workers",
            batch_size,
            self.max_workers,
        )
        generator = PolicyGenerator(policy)
        passwords = self._run_stage(
            "generation",
            lambda _index: generator.generate(),
            range(batch_size),
            discard=_erase_all,
        )
        LOG.debug("Generated %d passwords", len(passwords))
        try:
            records = self._run_stage("hashing", self._hash_one, passwords)
        finally:
            # units cancelled before they started still hold plaintext
            _erase_all(passwords)
        LOG.info("Hashed %d passwords", len(records))
        return records

    def _hash_one(self, password: GeneratedPassword) -> HashRecord:
        with password:
            return self.hasher.hash(password.plaintext)

    def _run_stage(
        self,
        stage: str,
        unit: Callable[[T], R],
        items: Iterable[T],
        discard: Optional[Callable[[List[R]], None]] = None,
    ) -> List[R]:
        """Run one unit per item and collect the results or the failure.

        Parameters
        ----------
        stage : str
            The stage name, for logging.
        unit : Callable[[T], R]
            The unit of work.
        items : Iterable[T]
            The inputs, one per unit.
        discard : Optional[Callable[[List[R]], None]], optional
            Called with the completed results of a failed stage.

        Returns
        -------
        List[R]
            The results, if every unit succeeded.

        Raises
        ------
        BaseException
            The first failure, in submission order.
        """
        executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix=f"passbatch-{stage}",
        )
        futures: List["Future[R]"] = []
        try:
            for item in items:
                futures.append(executor.submit(unit, item))
            wait(futures, return_when=FIRST_EXCEPTION)
        except BaseException:
            executor.shutdown(wait=True, cancel_futures=True)
            if discard is not None:
                discard(_completed(futures))
            raise
        executor.shutdown(wait=True, cancel_futures=True)
        results: List[R] = []
        failure: Optional[BaseException] = None
        for future in futures:
            if future.cancelled():
                continue
            error = future.exception()
            if error is None:
                results.append(future.result())
            elif failure is None:
                failure = error
        if failure is not None:
            LOG.error(
                "Batch aborted in the %s stage, discarding %d completed units",
                stage,
                len(results),
            )
            if discard is not None:
                discard(results)
            raise failure
        return results


def _completed(futures: List["Future[R]"]) -> List[R]:
    return [
        future.result()
        for future in futures
        if future.done()
        and not future.cancelled()
        and future.exception() is None
    ]


__all__ = ["BatchDispatcher"]
