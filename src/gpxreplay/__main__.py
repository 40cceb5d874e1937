from __future__ import annotations

from gpxreplay.app.bootstrap import main


if __name__ == "__main__":
    raise SystemExit(main())
