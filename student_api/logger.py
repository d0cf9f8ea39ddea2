# logger.py

import logging


class RequestIdFilter(logging.Filter):
    """ Fill in request_id for records that were logged without one (uvicorn, sqlite, etc). """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "N/A"
        return True


# Configure logging into structured JSON format
def configure_logging(level: str = "INFO"):
    handler = logging.StreamHandler()
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(
        logging.Formatter(
            fmt='{"timestamp": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s", "request_id": "%(request_id)s"}',
            datefmt='%Y-%m-%dT%H:%M:%S'
        )
    )
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


# Named logger instance
logger = logging.getLogger("student_api_logger")


def log_info(message: str, request_id: str = "N/A"):
    logger.info(message, extra={"request_id": request_id})

def log_error(message: str, request_id: str = "N/A"):
    logger.error(message, extra={"request_id": request_id})

def log_debug(message: str, request_id: str = "N/A"):
    logger.debug(message, extra={"request_id": request_id})

def log_warning(message: str, request_id: str = "N/A"):
    logger.warning(message, extra={"request_id": request_id})
