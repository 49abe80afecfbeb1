# docindex/profiler.py
import logging
import time
from io import StringIO

logger = logging.getLogger('docindex.profiler')


class Profiler:
    def __init__(self):
        self.timings = {}
        self.messages = []
        self.start_time = None

    def timer(self, task_name):
        """Returns a context manager to time a code block."""
        return Timer(task_name, self)

    def log_message(self, message):
        """Logs a message and keeps it for the report."""
        self.messages.append(message)
        logger.info(message)

    def start_global_timer(self):
        """Starts the global execution timer."""
        self.start_time = time.time()

    def get_global_time(self):
        if self.start_time is None:
            return 0.0
        return time.time() - self.start_time

    def generate_report(self, doc_count: int, vocab_size: int, filename: str = None) -> str:
        """Returns formatted performance report as string and optionally writes to a file"""
        report = StringIO()

        report.write("=== Timing Breakdown ===\n")
        for task, duration in self.timings.items():
            report.write(f"{task}: {duration:.4f}s\n")

        tracked_total = sum(self.timings.values())
        report.write(f"\nTracked Operations Total: {tracked_total:.4f}s\n")
        report.write(f"Global Time: {self.get_global_time():.4f}s\n")

        report.write("\n=== Index Summary ===\n")
        report.write(f"Documents: {doc_count:,}\n")
        report.write(f"Vocabulary Size: {vocab_size:,}\n")
        if tracked_total > 0:
            report.write(f"Throughput: {doc_count / tracked_total:.2f} documents/second\n")

        if self.messages:
            report.write("\n=== Messages ===\n")
            for message in self.messages:
                report.write(f"{message}\n")

        report_content = report.getvalue()

        if filename:
            with open(filename, "w") as f:
                f.write(report_content)

        return report_content


class Timer:
    def __init__(self, task_name, profiler):
        self.task_name = task_name
        self.profiler = profiler

    def __enter__(self):
        self.start = time.time()
        return self

    def __exit__(self, *args):
        elapsed = time.time() - self.start
        timings = self.profiler.timings
        timings[self.task_name] = timings.get(self.task_name, 0.0) + elapsed
