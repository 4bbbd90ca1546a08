# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of token sequences for display."""

from dfalex.report.render import (
    TokenRecord,
    TokenReport,
    build_report,
    render_json,
    render_source_echo,
    render_table,
)

__all__ = [
    "TokenRecord",
    "TokenReport",
    "build_report",
    "render_json",
    "render_source_echo",
    "render_table",
]
