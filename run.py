import logging
import sys

import uvicorn

from tubegate.config import settings

VARIANTS = {
    "pages": "tubegate.main:app",
    "api": "tubegate.main:api_app",
}

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    variant = sys.argv[1] if len(sys.argv) > 1 else "pages"
    if variant not in VARIANTS:
        sys.exit(f"usage: run.py [{'|'.join(VARIANTS)}]")
    uvicorn.run(VARIANTS[variant], host=settings.HOST, port=settings.PORT)
