"""Thread preview server: split long posts into platform-sized threads."""

import logging
import sys
from pathlib import Path

# Add the project directory to path for module imports
sys.path.insert(0, str(Path(__file__).parent))

from dotenv import load_dotenv

# Load .env from the project directory
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)

logger = logging.getLogger(__name__)


def main():
    from core.settings import load_settings
    from web.app import create_app

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)

    base_url = f"http://{settings.host}:{settings.port}"
    logger.info("preview API at %s/api/preview, platforms at %s/api/platforms", base_url, base_url)
    app.run(host=settings.host, port=settings.port, debug=False)


if __name__ == "__main__":
    main()
