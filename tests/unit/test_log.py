import logging

from rich.logging import RichHandler

from termflame import set_log_level


def test_set_log_level_installs_a_single_handler():
    # GIVEN
    logger = logging.getLogger("termflame")
    previous_handlers = list(logger.handlers)

    try:
        # WHEN
        set_log_level(logging.INFO)
        set_log_level(logging.DEBUG)

        # THEN
        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert rich_handlers[0].level == logging.DEBUG
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers = previous_handlers
        logger.setLevel(logging.NOTSET)
