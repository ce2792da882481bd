# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Batch generation and hashing."""

from .dispatcher import BatchDispatcher

__all__ = ["BatchDispatcher"]
