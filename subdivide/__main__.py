# -*- coding: utf-8 -*-
"""
Subdivide Package Entry Point

Allows running subdivide as a module:
    python -m subdivide -i mesh.xml -o mesh_fine.xml -u 4
"""

import sys

from subdivide.cli import main

if __name__ == '__main__':
    sys.exit(main())
