"""Tests for the DebugManager logging front end."""

from dropfour.debug import DebugLevel, DebugManager, debug
from dropfour.game.engine import new_game


def read_log(path):
    return path.read_text() if path.exists() else ""


class TestDebugManager:
    """Levels, component filtering, log files and timers."""

    def test_default_level(self):
        assert DebugManager().level == DebugLevel.WARNING

    def test_level_filtering(self, tmp_path):
        log_file = tmp_path / "dropfour.log"
        debug.configure(level=DebugLevel.INFO, log_file=str(log_file))
        debug.info("shown", "engine")
        debug.debug("hidden", "engine")

        contents = read_log(log_file)
        assert "[engine] shown" in contents
        assert "hidden" not in contents

    def test_component_filtering(self, tmp_path):
        log_file = tmp_path / "dropfour.log"
        debug.configure(level=DebugLevel.DEBUG, log_file=str(log_file), components=["env"])
        debug.debug("from env", "env")
        debug.debug("from engine", "engine")

        contents = read_log(log_file)
        assert "[env] from env" in contents
        assert "from engine" not in contents

    def test_disabled(self, tmp_path):
        log_file = tmp_path / "dropfour.log"
        debug.configure(level=DebugLevel.TRACE, log_file=str(log_file), enabled=False)
        debug.error("nothing", "engine")
        assert "nothing" not in read_log(log_file)

    def test_trace_level(self, tmp_path):
        log_file = tmp_path / "dropfour.log"
        debug.configure(level=DebugLevel.TRACE, log_file=str(log_file))
        new_game().apply_move(3)

        contents = read_log(log_file)
        assert "TRACE - [board] Placed FIRST at (5, 3)" in contents
        assert "[engine] Move 1: FIRST plays column 3" in contents

    def test_engine_logs_outcome(self, tmp_path):
        log_file = tmp_path / "dropfour.log"
        debug.configure(level=DebugLevel.INFO, log_file=str(log_file))
        game = new_game()
        for column in [0, 1, 0, 1, 0, 1, 0]:
            game.apply_move(column)

        assert "[engine] FIRST wins on move 7 at (2, 0)" in read_log(log_file)

    def test_timer(self):
        debug.start_timer("unit")
        elapsed = debug.end_timer("unit")
        assert elapsed is not None and elapsed >= 0
        assert debug.end_timer("unit") is None

    def test_set_from_string(self):
        assert debug.set_from_string("Trace") is True
        assert debug.level == DebugLevel.TRACE
        assert debug.set_from_string("loud") is False
        assert debug.level == DebugLevel.TRACE
