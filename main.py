import logging

import uvicorn

from contact_relay.dependencies import get_settings
from contact_relay.main import app
from contact_relay.models.settings import Settings

if __name__ == "__main__":
    settings: Settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    uvicorn.run(app, host=settings.host, port=settings.port)
