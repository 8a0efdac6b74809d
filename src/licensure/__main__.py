# SPDX-License-Identifier: MPL-2.0
import sys

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
