# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Levixia screening engine.

Rule-based screening for dyslexia-related learning differences from four
short tests, with an HTTP API and an optional narrative report.
"""

__version__ = "1.0.0"
