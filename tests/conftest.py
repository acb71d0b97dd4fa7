import pytest
import sys
from pathlib import Path

# Ensure src on path for imports
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / 'src'
for p in (SRC,):
    sp = str(p)
    if sp not in sys.path:
        sys.path.insert(0, sp)

from swiftcma.config import settings as settings_mod  # noqa: E402
from swiftcma.ingest import Table  # noqa: E402


SAMPLE_CSV = (
    "Property Address,List Price,Sold Price,Beds,Baths,SqFt,DOM,Status\n"
    "12 Oak St,\"$310,000\",\"$300,000\",3,2,1500,12,Sold\n"
    "48 Elm Ave,\"$329,000\",\"$320,000\",3,2.5,1600,0,Sold\n"
    "7 Pine Rd,\"$345,000\",\"$340,000\",4,3,1700,30,Sold\n"
    ",\"$999,000\",\"$990,000\",5,4,3000,5,Sold\n"
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test sees settings rebuilt from its own environment."""
    for var in ("SWIFTCMA_MAX_ROWS", "SWIFTCMA_EXPORT_DIR", "SWIFTCMA_AGENT_NAME"):
        monkeypatch.delenv(var, raising=False)
    settings_mod.reset_settings()
    yield
    settings_mod.reset_settings()


@pytest.fixture()
def sample_csv(tmp_path):
    path = tmp_path / "comps.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture()
def sample_table():
    headers = ["Property Address", "Sold Price", "SqFt", "DOM"]
    rows = [
        {"Property Address": "12 Oak St", "Sold Price": "$300,000", "SqFt": "1,500", "DOM": "12"},
        {"Property Address": "48 Elm Ave", "Sold Price": "$320,000", "SqFt": "1,600", "DOM": ""},
        {"Property Address": "7 Pine Rd", "Sold Price": "$340,000", "SqFt": "1,700", "DOM": "30"},
    ]
    return Table(headers=headers, rows=rows)
