import logging
import os
import secrets
from concurrent_log_handler import ConcurrentRotatingFileHandler
from ..config.settings import LOG_DIR, LOG_LEVEL
from ..config.security_config import SecurityConfig


def setup_logging():
    logger = logging.getLogger("member_auth") # create logger
    if not logger.handlers: # check if handlers already exist
        logger.setLevel(LOG_LEVEL) # set log level

        # create log directory if it doesn't exist
        os.makedirs(LOG_DIR, exist_ok=True)

        # create a file handler
        file_handler = ConcurrentRotatingFileHandler(
            os.path.join(LOG_DIR, "auth.log"),
            maxBytes=10 * 1024 * 1024, # 10MB
            backupCount=50
        )
        file_handler.setLevel(LOG_LEVEL)

        #  create a console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(LOG_LEVEL)

        # create a formatter
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(filename)s - %(lineno)d" , datefmt="%Y-%m-%d %H:%M:%S")
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        #  add the handlers to the logger
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
    return logger


def normalize_email(email: str) -> str:
    return email.strip().lower()


def generate_refresh_token(member_id: str) -> str:
    """Opaque refresh token, prefixed with the owner id and not derived from the access token."""
    return f"{member_id}.{secrets.token_hex(SecurityConfig.REFRESH_TOKEN_BYTES)}"
