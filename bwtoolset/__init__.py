# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""bwtoolset — loads and validates benchmark framework configuration files."""

__version__ = "0.1.0"
