from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent
SRC = REPO_ROOT / "src" / "employee_records"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from employee_records.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
