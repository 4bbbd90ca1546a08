# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for dfalex."""
