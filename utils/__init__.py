"""
utils/
------
Shared helpers.

    from utils.logger import get_logger, init_logger
"""
