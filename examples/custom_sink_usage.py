"""examples/custom_sink_usage.py - Implement and bind a custom LogSink.

Shows how to subclass LogSink to send finished lines anywhere. In this
example the sink keeps a per-slot history in memory, which is also a handy
pattern for assertions in tests.

Run:
    python examples/custom_sink_usage.py
"""

from collections import defaultdict
from typing import Dict, List

from slotlog import LogSink, bind_log_sink, make_log_line


class HistorySink(LogSink):
    """Keeps every line ever delivered, grouped by slot.

    Attributes:
        history: Maps a slot index to the list of texts delivered for it.
    """

    def __init__(self) -> None:
        self.history: Dict[int, List[str]] = defaultdict(list)
        self.setup_log_sink()

    def on_log(self, slot: int, text: str) -> None:
        self.history[slot].append(text)


if __name__ == "__main__":
    sink = HistorySink()
    bind_log_sink(sink)

    status = make_log_line(4)
    for step in range(3):
        with status() as out:
            out << "step " << step << " of " << 3

    # Without a with-block, end the chain with commit().
    (status() << "done").commit()

    for slot, texts in sink.history.items():
        print(f"line {slot}:")
        for text in texts:
            print(f"  {text}")
