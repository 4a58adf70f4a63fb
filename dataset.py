"""Synthetic datasets, produced lazily one sample at a time.

Every generator returns a pair ``(X, y)`` of iterators: ``X`` yields the input
vectors and ``y`` yields the matching label/target vectors in the same order.
Samples are grouped by class, all of class 0 first.
"""
import math

import numpy as np


def _check_counts(samples, classes=1):
    # Zero samples would mean dividing by zero below
    if samples <= 0:
        raise ValueError(f'samples must be positive, got {samples}')
    if classes <= 0:
        raise ValueError(f'classes must be positive, got {classes}')


def _labels(samples, classes):
    for class_number in range(classes):
        for _ in range(samples):
            yield np.array([float(class_number)])


def sine(samples=1000):
    _check_counts(samples)
    X = (np.array([i / samples]) for i in range(samples))
    y = (np.array([math.sin(2 * math.pi * (i / samples))]) for i in range(samples))
    return X, y


def spiral(samples, classes, rng=None):
    _check_counts(samples, classes)
    rng = np.random.default_rng(rng)

    def points():
        for class_number in range(classes):
            for i in range(samples):
                r = i / samples
                # Every class gets its own arm, jittered a little
                t = class_number * 4.0 + rng.uniform(-0.2, 0.2)
                yield np.array([r * math.sin(t * 2.5), r * math.cos(t * 2.5)])

    return points(), _labels(samples, classes)


def vertical(samples, classes, rng=None):
    _check_counts(samples, classes)
    rng = np.random.default_rng(rng)

    def points():
        for class_number in range(classes):
            for _ in range(samples):
                yield np.array([rng.uniform(-0.1, 0.1) + class_number / 3.0,
                                rng.uniform(-0.1, 0.1) + 0.5])

    return points(), _labels(samples, classes)
