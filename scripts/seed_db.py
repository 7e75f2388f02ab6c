from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from dotenv import load_dotenv

from clubhive.database.seed import seed_store
from clubhive.settings import get_settings_module
from clubhive.storage import build_store


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store = build_store(settings)

    seeded = seed_store(store)
    if seeded:
        print(f"OK: Seeded {', '.join(seeded)} ({settings.STORE_BACKEND} store)")
    else:
        print(f"OK: Nothing to seed ({settings.STORE_BACKEND} store already populated)")


if __name__ == "__main__":
    main()
