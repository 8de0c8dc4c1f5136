"""
Aspect Frame

Print how each resize mode fits a target aspect ratio into a container, or
open the interactive demo window with ``--gui``.
"""

from __future__ import annotations

from aspect_frame.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
