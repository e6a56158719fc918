"""
Logging configuration for the newsletter mailing list store.
Sets up logging with file and console output.

Importing this module only creates the named logger; handlers, the log
directory and .env loading happen in setup_logging().
"""

import os
import logging
from pathlib import Path
from typing import Optional, Union
from dotenv import load_dotenv

LOGGER_NAME = 'newsletter_mailing_list'
ENV_PATH = Path(__file__).parent / '.env'

def setup_logging(log_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        log_dir: Directory for the log file; defaults to LOG_DIR from the
                 environment, or 'logs' under the working directory

    Returns:
        The application logger
    """
    # Load environment variables from .env file
    load_dotenv(dotenv_path=ENV_PATH)

    log_level = getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO)
    log_dir = Path(log_dir or os.getenv('LOG_DIR', 'logs'))

    # Ensure log directory exists
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / 'mailing_list.log'

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )

    # Check for missing storage configuration
    table_name = os.getenv('SUBSCRIBERS_TABLE_NAME')
    region = os.getenv('AWS_REGION') or os.getenv('AWS_DEFAULT_REGION')

    if not table_name:
        logging.warning("SUBSCRIBERS_TABLE_NAME is not set. Falling back to the default table name.")

    if not region:
        logging.warning("AWS region is not set. Store construction may fail.")

    return logging.getLogger(LOGGER_NAME)

# Application logger; handlers are attached by setup_logging()
logger = logging.getLogger(LOGGER_NAME)
