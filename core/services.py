"""
Base service class.
Services hold the business rules and talk to the database through repositories.
"""
import logging


class BaseService:
    """
    Common logging helpers for services.
    Messages go to the logger of the concrete service's module, with the
    keyword context appended.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__)

    def log_info(self, message: str, **context):
        self.logger.info(f"{message} | Context: {context}")

    def log_warning(self, message: str, **context):
        """Log warning message with context"""
        self.logger.warning(f"{message} | Context: {context}")

    def log_error(self, message: str, error: Exception = None, **context):
        """Log error message with context"""
        if error:
            self.logger.error(f"{message} | Context: {context}", exc_info=error)
        else:
            self.logger.error(f"{message} | Context: {context}")
