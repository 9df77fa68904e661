# cafenet/main.py
import uvicorn

from cafenet.api import create_app
from cafenet.utils.settings import HOST, PORT
from cafenet.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()


def run():
    logger.info(f"Starting Aradabiya Cafenet on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
