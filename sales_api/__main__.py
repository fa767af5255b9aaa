"""
Run the API with uvicorn: ``python -m sales_api``.

Exits with a non-zero status when the database cannot be initialized.
"""

import uvicorn

from sales_api.core.config import settings
from sales_api.main import app


def main() -> None:
    # log_config=None keeps the Loguru interception installed by the app
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, lifespan="on", log_config=None)


if __name__ == "__main__":
    main()
