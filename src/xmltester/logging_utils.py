import logging

PACKAGE_LOGGER = 'xmltester'


class CustomFormatter(logging.Formatter):
    """Custom formatter to remove the project name from the logger name."""

    def format(self, record):
        if record.name.startswith(PACKAGE_LOGGER):
            record.name = record.name[len(PACKAGE_LOGGER):]
            if record.name.startswith('.'):
                record.name = record.name[1:]
        return super().format(record)


def setup_logging(verbose: bool, level: int = None):
    """Set up logging for the xmltester package.

    ``level`` wins over ``verbose`` when both are given.
    """
    if level is None:
        level = logging.DEBUG if verbose else logging.INFO

    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.setLevel(level)
    # Repeated calls (one per test module is common) must not stack handlers
    for existing in list(root_logger.handlers):
        if isinstance(existing.formatter, CustomFormatter):
            root_logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(CustomFormatter('%(levelname)s:%(name)s:%(message)s'))
    root_logger.addHandler(handler)
    # Prevent propagation to the root logger to avoid duplicate messages
    root_logger.propagate = False
