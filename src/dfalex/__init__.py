# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""dfalex: a DFA-driven lexical analyzer."""
