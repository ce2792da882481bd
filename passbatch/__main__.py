# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Allow running with ``python -m passbatch``."""

from passbatch.cli import app

if __name__ == "__main__":
    app()
