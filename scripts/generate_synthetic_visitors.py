import json
import os
import shutil
import sys
from datetime import datetime

# Ensure project root is on sys.path so that 'visitor_records' is importable when running this script directly
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from visitor_records.synthetic import generate_synthetic_visitors

DATA_DIR = os.path.join(PROJECT_ROOT, "data")
VISITORS_JSON = os.path.join(DATA_DIR, "visitors.json")


def backup_visitors():
    if os.path.exists(VISITORS_JSON):
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_path = os.path.join(DATA_DIR, f"visitors.backup_{ts}.json")
        shutil.copy(VISITORS_JSON, backup_path)
        return backup_path
    return None


def write_visitors(n: int = 25, seed: int = 777) -> None:
    os.makedirs(DATA_DIR, exist_ok=True)

    backup_path = backup_visitors()
    if backup_path:
        print(f"Backup creado: {backup_path}")

    visitors = generate_synthetic_visitors(n=n, seed=seed)
    with open(VISITORS_JSON, "w", encoding="utf-8") as f:
        json.dump(visitors, f, ensure_ascii=False, indent=2)

    print(f"Visitantes generados: {len(visitors)}")
    print(f"Archivo destino: {VISITORS_JSON}")
    # python -m http.server 5000 --directory data  ->  VISITORS_API_URL=http://localhost:5000/visitors.json


if __name__ == "__main__":
    write_visitors(n=25, seed=777)
