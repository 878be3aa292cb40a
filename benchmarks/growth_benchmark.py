#!/usr/bin/env python3
"""
Simple timing benchmark for growth policies.

Appends n elements starting from capacity 1 under each growth policy and
compares against writing into a preallocated array. Results are emitted as
JSON log records, one per configuration.
"""

import time

import numpy as np

from fixed_arrays import GrowableBuffer, append, shuffle, GROWTH_POLICIES
from fixed_arrays.jsonlog import log


def time_preallocated(n):
    start = time.perf_counter()
    a = np.zeros(n)
    for i in range(n):
        a[i] = i
    return time.perf_counter() - start


def time_append(n):
    start = time.perf_counter()
    a = np.zeros(1)
    for i in range(n):
        a = append(a, i, float(i))
    return time.perf_counter() - start, len(a)


def time_buffer(n, policy):
    start = time.perf_counter()
    buf = GrowableBuffer.with_capacity(1, push_policy=policy)
    for i in range(n):
        buf.push(float(i))
    return time.perf_counter() - start, buf.capacity


def time_shuffle(n, seed=42):
    a = np.arange(n)
    start = time.perf_counter()
    shuffle(a, rng=seed)
    return time.perf_counter() - start


def main(sizes=(1_000, 10_000, 100_000)):
    for n in sizes:
        log("preallocated", n=n, seconds=time_preallocated(n))
        seconds, capacity = time_append(n)
        log("append", n=n, seconds=seconds, final_capacity=capacity)
        for name in GROWTH_POLICIES:
            seconds, capacity = time_buffer(n, name)
            log("buffer_push", n=n, policy=name, seconds=seconds, final_capacity=capacity)
        log("shuffle", n=n, seconds=time_shuffle(n))


if __name__ == "__main__":
    main()
