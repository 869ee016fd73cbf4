"""AWS Lambda entry point for the archive API, via Mangum."""
import logging

from mangum import Mangum

from archive_api.config.settings import get_settings
from archive_api.main import create_app

settings = get_settings()

# the Lambda runtime installs its own root handler, which makes basicConfig a no-op
logging.getLogger().setLevel(settings.log_level)

app = create_app(settings)

# API Gateway events have no lifespan
handler = Mangum(app, lifespan="off")

lambda_handler = handler
