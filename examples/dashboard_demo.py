"""
Demonstration of rendering a dashboard with sheetrender.

Usage:
    python examples/dashboard_demo.py                  # dry run, prints both batches
    python examples/dashboard_demo.py SPREADSHEET_ID   # renders into the "Demo" tab

Authentication: requires either a service account JSON at
~/.config/gspread/service_account.json or OAuth credentials at
~/.config/gspread/credentials.json (browser flow on first use). The target
spreadsheet must already contain a sheet named "Demo".
"""

import logging
import sys

import gspread
import pandas as pd

from sheetrender import (
    DemoDashboardComponent,
    DemoDashboardProps,
    InMemoryBackend,
    render_sheet,
    render_to_google_sheets,
)
from sheetrender.utils import batches_to_json

SHEET_NAME = "Demo"


def _get_gspread_client() -> gspread.Client:
    """Authenticate with Google Sheets, trying service account then OAuth."""
    try:
        gc = gspread.service_account()
        print("✓ Authenticated via service account")
        return gc
    except Exception:
        pass
    try:
        gc = gspread.oauth()
        print("✓ Authenticated via OAuth")
        return gc
    except Exception as exc:
        print(f"✗ Could not authenticate with Google Sheets: {exc}")
        print()
        print("Set up credentials using one of:")
        print(
            "  • Service account: place key at ~/.config/gspread/service_account.json"
        )
        print("  • OAuth: place credentials at ~/.config/gspread/credentials.json")
        sys.exit(1)


def main():
    """Render the demo dashboard, live or as a dry run."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    projects = pd.DataFrame({
        "Project": ["Surf Schedule App", "Invoice Generator", "ColorMyPie Add-on", "Client Dashboard"],
        "Owner": ["Lidia", "Lidia", "Lidia", "Lidia"],
        "Hours": [6, 4, 3, 5],
        "Amount": [750, 520, 380, 640],
    })
    props = DemoDashboardProps.from_frame(SHEET_NAME, projects)

    if len(sys.argv) < 2:
        print("No spreadsheet id given, rendering a dry run...")
        backend = InMemoryBackend({SHEET_NAME: (1000, 26)})
        context = render_sheet("dry-run", DemoDashboardComponent, props, backend)
        print(batches_to_json(context))
        print(f"✓ {len(backend.calls)} batch call(s) recorded")
        return

    spreadsheet_id = sys.argv[1]
    gc = _get_gspread_client()
    context = render_to_google_sheets(spreadsheet_id, DemoDashboardComponent, props, gc)
    print(
        f"✓ Rendered {len(context.operations)} formatting request(s) and "
        f"{len(context.value_writes)} value range(s) into {spreadsheet_id}"
    )


if __name__ == "__main__":
    main()
