from errorlog.handlers.exception_handler import booking_exception_handler

__all__ = ["booking_exception_handler"]
