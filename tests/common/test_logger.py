import pytest

from puzzles.common import logger as log_module
from puzzles.common.logger import component_filter, configure, formatter, logger


def make_record(component, level):
    return {"extra": {"component": component}, "level": logger.level(level)}


@pytest.fixture
def restore_level():
    yield
    configure("INFO")


class TestLogger:
    def test_default_level_filters_debug(self, restore_level):
        configure("INFO")

        assert component_filter(make_record("jam", "INFO"))
        assert not component_filter(make_record("jam", "DEBUG"))

    def test_configure_lowers_default_level(self, restore_level):
        configure("DEBUG")

        assert log_module._default_level == "DEBUG"
        assert component_filter(make_record("bfs_solver", "DEBUG"))

    def test_component_level_overrides_default(self, restore_level):
        configure("DEBUG")

        assert not component_filter(make_record("model", "DEBUG"))
        assert component_filter(make_record("model", "INFO"))

    def test_unknown_level_rejected(self, restore_level):
        with pytest.raises(ValueError):
            configure("LOUD")

    def test_formatter_uses_component_colour(self):
        template = formatter({"extra": {"component": "hoppers"}})

        assert "<blue>hoppers" in template
        assert template.endswith("\n")

    def test_messages_reach_sinks(self):
        messages = []
        sink_id = logger.add(messages.append, format="{message}", level="INFO")
        try:
            logger.bind(component="cli").info("solved")
        finally:
            logger.remove(sink_id)

        assert messages == ["solved\n"]
