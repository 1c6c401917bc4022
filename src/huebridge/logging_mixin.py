import logging

LOGGER_NAME = "huebridge"


class LoggingMixin:
    @property
    def logger(self) -> logging.Logger:
        if not hasattr(self, "_logger"):
            # class name below the package logger, e.g. "huebridge.HttpClient"
            self._logger = logging.getLogger(f"{LOGGER_NAME}.{self.__class__.__name__}")
        return self._logger
