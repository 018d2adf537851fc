"""
Development server launcher.

Loads the .env file, configures logging and serves the API with uvicorn,
reloading on code changes.

Usage:
    python scripts/run_dev.py [port]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env before settings are read
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8000

    print("=" * 60)
    print(f"{settings.PROJECT_NAME} {settings.VERSION} - Development Server")
    print("=" * 60)
    print()
    print(f"API:    http://localhost:{port}/api/v1")
    print(f"Docs:   http://localhost:{port}/docs")
    print(f"Charts: {settings.CHART_RENDER_URL}")
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)

    # Logging is configured by app.main; keep uvicorn's own config out of the way.
    uvicorn.run("app.main:app", host="0.0.0.0", port=port, reload=True, log_level=settings.LOG_LEVEL.lower(),
                log_config=None)
