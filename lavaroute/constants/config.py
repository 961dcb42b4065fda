from __future__ import annotations

import os

from lavaroute.__version__ import __version__

CLIENT_NAME = os.getenv("LAVAROUTE__CLIENT_NAME", f"LavaRoute/{__version__}")
