# SPDX-License-Identifier: MIT
"""Command line interface for verbump."""

__version__ = "0.1.0"
