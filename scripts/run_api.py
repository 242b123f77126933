import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import uvicorn

from storefront_auth.config import load_config, validate_config
from storefront_auth.errors import ConfigError


def main() -> None:
    # Refuse to start without the signing secret / API key.
    try:
        validate_config(load_config())
    except ConfigError as e:
        print(f"[api] {e}", file=sys.stderr)
        sys.exit(1)

    host = os.environ.get("API_HOST", "0.0.0.0")
    port = int(os.environ.get("API_PORT", "8000"))
    uvicorn.run("storefront_auth.api.server:create_app", factory=True, host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
