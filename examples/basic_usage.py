"""examples/basic_usage.py - slotlog debug-overlay demo.

Simulates a few frames of a game loop. Three call sites each own a fixed line
of the overlay and rewrite it every frame. In frame 2 the player update
fails half-way through its line, so that row is not delivered and is blanked
when the frame closes. In frame 3 the physics row is skipped and blanked too.

Run:
    python examples/basic_usage.py
"""

import logging

from slotlog import OverlaySink, bind_log_sink, make_log_line

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Startup: build the sink once and bind it for the whole process
# ---------------------------------------------------------------------------
overlay = OverlaySink()
bind_log_sink(overlay)

# ---------------------------------------------------------------------------
# Call sites: one LogLine per overlay row, created once at module scope
# ---------------------------------------------------------------------------
frame_line = make_log_line(0)
player_line = make_log_line(1)
physics_line = make_log_line(2)


def update_player(frame: int) -> None:
    with player_line() as out:
        out << "player x=" << frame * 1.5 << " y=" << 10
        if frame == 2:
            raise RuntimeError("player update interrupted")


def update_physics(frame: int) -> None:
    physics_line.emit("bodies=", 3 + frame, " contacts=", frame % 2)


if __name__ == "__main__":
    for frame in range(4):
        frame_line.emit("frame ", frame)
        try:
            update_player(frame)
        except RuntimeError as exc:
            print(f"-- frame {frame}: {exc}")
        if frame != 3:
            update_physics(frame)

        stale = overlay.clear_log_for_next_frame()
        print(f"=== overlay after frame {frame} (stale rows: {stale[:5]}...) ===")
        print(overlay.render(skip_blank=True))
        print()
