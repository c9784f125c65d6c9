#!/usr/bin/env python3
"""
Copyright (c) 2025 The chatlayout authors

This file is part of chatlayout.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Entry point for running chatlayout as a module with 'python -m chatlayout'
"""
from chatlayout.main import main

if __name__ == "__main__":
    main()
