# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Package version."""

__version__ = "0.1.0"
