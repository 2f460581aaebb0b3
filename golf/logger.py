import logging

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def configure_logging(level="INFO", log_file=None):
    """Console logging always, plus a file handler when a path is configured."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    golf_logger.setLevel(level)


# Logger shared by the hole page modules
golf_logger = logging.getLogger("GOLF_HOLES")
