"""
Message collection for a measure run.

Every registered message is kept on the runner (for the host or the CLI to
display) and forwarded to the standard logging module.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class MessageLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class RunMessage:
    """One message registered during a run."""
    level: MessageLevel
    text: str


@dataclass
class MeasureRunner:
    """
    Collects info, warning and error messages plus the final condition.

    Usage:
        runner = MeasureRunner()
        ok = measure.run(model, runner, {"template": "90.1-2013"})
        for message in runner.errors:
            print(message)
    """
    messages: List[RunMessage] = field(default_factory=list)
    final_condition: Optional[str] = None

    def register_info(self, text: str) -> None:
        self.messages.append(RunMessage(MessageLevel.INFO, text))
        logger.info(text)

    def register_warning(self, text: str) -> None:
        self.messages.append(RunMessage(MessageLevel.WARNING, text))
        logger.warning(text)

    def register_error(self, text: str) -> None:
        self.messages.append(RunMessage(MessageLevel.ERROR, text))
        logger.error(text)

    def register_final_condition(self, text: str) -> None:
        self.final_condition = text
        logger.info(text)

    def _texts(self, level: MessageLevel) -> List[str]:
        return [m.text for m in self.messages if m.level == level]

    @property
    def infos(self) -> List[str]:
        return self._texts(MessageLevel.INFO)

    @property
    def warnings(self) -> List[str]:
        return self._texts(MessageLevel.WARNING)

    @property
    def errors(self) -> List[str]:
        return self._texts(MessageLevel.ERROR)
