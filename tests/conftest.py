from __future__ import annotations

import os

# Qt widget tests run without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
