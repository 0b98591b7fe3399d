import logging

from nodechain.application.port import StepLogger


class LoggingStepLogger(StepLogger):
    """Writes step lifecycle messages to the standard logging tree.

    Records carry ``step`` and ``correlation_id`` extras so handlers can
    route or index them.
    """

    def __init__(self, logger: logging.Logger | None = None, correlation_id: str | None = None):
        self.logger = logger if logger is not None else logging.getLogger("nodechain.steps")
        self.correlation_id = correlation_id

    def bind(self, correlation_id: str) -> "LoggingStepLogger":
        return LoggingStepLogger(self.logger, correlation_id)

    def _extra(self, step: str) -> dict:
        return {"step": step, "correlation_id": self.correlation_id}

    def _prefix(self, step: str) -> str:
        if self.correlation_id is None:
            return f"[{step}]"
        return f"[{self.correlation_id}] [{step}]"

    def info(self, step: str, message: str) -> None:
        self.logger.info("%s %s", self._prefix(step), message, extra=self._extra(step))

    def error(self, step: str, message: str, cause: BaseException | None = None) -> None:
        if cause is None:
            self.logger.error("%s %s", self._prefix(step), message, extra=self._extra(step))
        else:
            self.logger.error(
                "%s %s - %s", self._prefix(step), message, cause, exc_info=cause, extra=self._extra(step)
            )
