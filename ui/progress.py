"""Pipeline progress reporting for the CLI and the upload API"""

import sys
import time
from abc import ABC, abstractmethod
from typing import Optional, TextIO

import structlog


class ProgressTracker(ABC):
    """Receives stage events from the Orchestrator"""

    # Display label per stage number
    stage_names = {
        0: "Workbook Loading",
        1: "Normalization",
        2: "Code Generation",
        3: "File Output",
        4: "Scaffolding",
    }

    def stage_label(self, stage_num: int) -> str:
        return self.stage_names.get(stage_num, f"Stage {stage_num}")

    @abstractmethod
    def start_stage(self, stage_num: int, stage_name: str):
        pass

    @abstractmethod
    def complete_stage(self, stage_num: int):
        pass

    @abstractmethod
    def fail(self, stage_num: int, message: str):
        pass

    @abstractmethod
    def complete(self):
        pass


class ConsoleProgress(ProgressTracker):
    """One line per stage event, with the time each stage took"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.started: dict[int, float] = {}
        self.completed: list[int] = []

    def start_stage(self, stage_num: int, stage_name: str):
        self.started[stage_num] = time.perf_counter()
        self._print(f"[{stage_num}] {stage_name}...")

    def complete_stage(self, stage_num: int):
        self.completed.append(stage_num)
        self._print(f"[{stage_num}] {self.stage_label(stage_num)} done ({self._elapsed(stage_num):.2f}s)")

    def fail(self, stage_num: int, message: str):
        self._print(f"[{stage_num}] {self.stage_label(stage_num)} failed: {message}")

    def complete(self):
        self._print(f"Generated front end in {len(self.completed)} stages")

    def _elapsed(self, stage_num: int) -> float:
        started = self.started.get(stage_num)
        return time.perf_counter() - started if started is not None else 0.0

    def _print(self, line: str):
        print(line, file=self.stream, flush=True)


class LoggingProgress(ProgressTracker):
    """Stage events as structured log records, for request handlers"""

    def __init__(self, logger_name: str = "panelforge.progress"):
        self.logger = structlog.get_logger(logger_name)
        self.completed = []
        self.failed_stage = None

    def start_stage(self, stage_num: int, stage_name: str):
        self.logger.info("Stage started", stage=stage_num, name=stage_name)

    def complete_stage(self, stage_num: int):
        self.completed.append(stage_num)
        self.logger.info("Stage complete", stage=stage_num, name=self.stage_label(stage_num))

    def fail(self, stage_num: int, message: str):
        self.failed_stage = stage_num
        self.logger.error("Stage failed", stage=stage_num, error=message)

    def complete(self):
        self.logger.info("Pipeline complete", stages=len(self.completed))
