import logging

import uvicorn
from dotenv import load_dotenv

from api.app import create_app
from api.dependencies import get_engine, get_settings
from repositories.sqlalchemy.base_sqlalchemy_repository import init_db

if __name__ == "__main__":
    load_dotenv()
    settings = get_settings()

    logging.root.setLevel(settings.log_level.upper())
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logging.root.addHandler(stream_handler)

    if settings.database_uri:
        logging.info("Creating missing tables")
        init_db(get_engine(settings.database_uri))

    logging.info("Start Serving on port %d", settings.port)
    uvicorn.run(create_app(), host="0.0.0.0", port=settings.port, log_config=None)
