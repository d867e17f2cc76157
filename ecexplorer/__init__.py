#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecexplorer package."

name = "ecexplorer"
__version__ = "2026.10.0"
__author__ = "The ecexplorer developers"
__author_email__ = "devs@ecexplorer.org"
__copyright__ = "Copyright (C) 2024-2026 The ecexplorer developers"
__license__ = "MIT License"
