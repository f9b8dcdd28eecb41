"""Console entry point: `fertility-sim` launches the Streamlit dashboard."""

from __future__ import annotations

import sys
from pathlib import Path

DASHBOARD = Path(__file__).resolve().parent / "streamlit_app.py"


def main() -> None:
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(DASHBOARD), *sys.argv[1:]]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
