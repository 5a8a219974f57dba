import logging

from .core.config import get_app_host, get_app_port
from .main import create_app

logger = logging.getLogger(__name__)

# Create Flask app
app = create_app()

if __name__ == "__main__":
    port = get_app_port()
    logger.info(
        f"Server is running on port {port}",
        extra={"context": {"port": port}},
    )
    app.run(host=get_app_host(), port=port)
